"""Authentication use cases."""

from .google_login_usecase import GoogleLoginUseCaseImpl
from .login_usecase import LoginUseCaseImpl
from .profile_usecases import GetProfileUseCaseImpl, UpdateProfileUseCaseImpl
from .signup_usecase import SignupUseCaseImpl

__all__ = [
    "SignupUseCaseImpl",
    "LoginUseCaseImpl",
    "GoogleLoginUseCaseImpl",
    "GetProfileUseCaseImpl",
    "UpdateProfileUseCaseImpl",
]
