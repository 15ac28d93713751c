from typing import Optional

from pydantic import BaseModel, Field


class NutritionEstimateRequest(BaseModel):
    image: Optional[str] = Field(None, description="Base64-encoded JPEG of the meal")


class NutritionEstimate(BaseModel):
    """Totals for the photographed portion, as estimated by the vision model"""

    calories_kcal: float
    protein_g: float
    carb_g: float
    fat_g: float
