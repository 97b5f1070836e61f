"""Use case for generating an insight from a prompt."""

import logging

from fastapi import HTTPException, status

from app.core.schemas import AuthenticatedUser
from app.features.entities.repositories import EntityRepository
from app.features.entities.usecases.get_entity_usecase import entity_not_found
from app.features.insights.dtos import GenerateInsightRequest, GenerateInsightResponse
from app.features.insights.models import Insight, InsightType
from app.features.insights.repositories import InsightRepository
from app.features.insights.services.errors import (
    ProviderAuthenticationError,
    ProviderError,
)
from app.features.insights.services.protocols import InsightGenerator

logger = logging.getLogger(__name__)

GENERATED_INSIGHT_TITLE = "AI Generated Insight"


class GenerateInsightUseCaseImpl:
    """Implementation of the generate insight use case."""

    def __init__(
        self,
        insight_repository: InsightRepository,
        entity_repository: EntityRepository,
        insight_generator: InsightGenerator,
        confidence: float,
    ):
        self.insight_repository = insight_repository
        self.entity_repository = entity_repository
        self.insight_generator = insight_generator
        self.confidence = confidence

    async def execute(
        self, request: GenerateInsightRequest, current_user: AuthenticatedUser
    ) -> GenerateInsightResponse:
        """Send the prompt to the provider and store the reply as an insight.

        Args:
            request: The prompt and an optional entity to attach the insight to
            current_user: The authenticated owner

        Returns:
            The generated text, its confidence and the model that produced it

        Raises:
            HTTPException: 404 if the entity is unknown or owned by another user,
                500 if the provider rejects the key or fails
        """
        if request.entity_id is not None:
            entity = await self.entity_repository.get_for_owner(
                current_user.user_id, request.entity_id
            )
            if entity is None:
                raise entity_not_found()

        try:
            generated = await self.insight_generator.generate(request.prompt)
        except ProviderAuthenticationError as e:
            logger.error("Insight provider rejected the API key: %s", e)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Insight provider API key invalid",
            )
        except ProviderError as e:
            logger.error("Insight generation failed: %s", e)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to generate insight",
            )

        insight = await self.insight_repository.create(
            Insight(
                user_id=current_user.user_id,
                entity_id=request.entity_id,
                title=GENERATED_INSIGHT_TITLE,
                content=generated.content,
                type=InsightType.GENERATED,
                confidence=self.confidence,
            )
        )
        logger.info(
            "Stored generated insight %s for user %s", insight.id, insight.user_id
        )

        return GenerateInsightResponse(
            insight=insight.content,
            confidence=self.confidence,
            model=generated.model,
        )
