"""Plan generation API routes."""

from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query

from models.schemas import GeneratedPlan, UserProfile
from services.media_service import MediaService
from services.motivation_service import MotivationService
from services.plan_generator import PlanGenerator
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["plans"])


def get_plan_generator() -> PlanGenerator:
    return PlanGenerator()


def get_motivation_service() -> MotivationService:
    return MotivationService()


def get_media_service() -> MediaService:
    return MediaService()


@router.post("/plans", response_model=GeneratedPlan, response_model_by_alias=True)
async def generate_plan(
    profile: UserProfile,
    generator: PlanGenerator = Depends(get_plan_generator),
):
    """Generate a workout and diet plan for the submitted profile.

    Always answers with a plan; when the provider is unavailable the plan has
    nutrition targets but no days or meals.
    """
    logger.info(f"Plan requested for {profile.name} ({profile.fitness_goal.value})")
    return await generator.generate(profile)


@router.get("/motivation", response_model=dict)
async def get_motivation(service: MotivationService = Depends(get_motivation_service)):
    """One short motivational quote."""
    return {"quote": await service.generate_quote()}


@router.get("/images/{kind}", response_model=dict)
async def get_image_url(
    kind: Literal["exercise", "food"],
    name: str = Query(..., description="Exercise or food name"),
    enhance: bool = Query(False, description="Ask the image-prompt model to enrich the prompt"),
    service: MediaService = Depends(get_media_service),
):
    """Image URL for an exercise or a food item."""
    try:
        url = await service.generate_image_url(name, kind, enhance=enhance)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"url": url}
