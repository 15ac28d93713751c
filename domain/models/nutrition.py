"""
Food plan models: plan -> day -> meal -> meal item.
"""

from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Integer, Time, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base, BigIntId


class FoodPlan(Base):
    """A client's meal plan, authored by one trainer"""

    __tablename__ = "food_plans"

    id = Column(BigIntId, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    trainer_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    )
    client_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    )
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    trainer = relationship("Profile", foreign_keys=[trainer_id])
    client = relationship("Profile", foreign_keys=[client_id])
    days = relationship(
        "FoodDay",
        back_populates="plan",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="[FoodDay.day_order, FoodDay.id]",
    )


class FoodDay(Base):
    """e.g. "Monday", "Tuesday" """

    __tablename__ = "food_days"

    id = Column(BigIntId, primary_key=True, autoincrement=True)
    plan_id = Column(
        BigIntId,
        ForeignKey("food_plans.id", ondelete="CASCADE"),
        nullable=False,
    )
    name = Column(Text, nullable=False)
    day_order = Column(Integer)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    plan = relationship("FoodPlan", back_populates="days")
    meals = relationship(
        "Meal",
        back_populates="day",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="[Meal.meal_order, Meal.id]",
    )


class Meal(Base):
    """e.g. "Breakfast", "Lunch" """

    __tablename__ = "meals"

    id = Column(BigIntId, primary_key=True, autoincrement=True)
    day_id = Column(
        BigIntId,
        ForeignKey("food_days.id", ondelete="CASCADE"),
        nullable=False,
    )
    name = Column(Text, nullable=False)
    meal_time = Column(Time)
    meal_order = Column(Integer)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    day = relationship("FoodDay", back_populates="meals")
    items = relationship(
        "MealItem",
        back_populates="meal",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="MealItem.id",
    )


class MealItem(Base):
    """A library food with a free-form quantity ("100g", "1 cup")"""

    __tablename__ = "meal_items"

    id = Column(BigIntId, primary_key=True, autoincrement=True)
    meal_id = Column(
        BigIntId,
        ForeignKey("meals.id", ondelete="CASCADE"),
        nullable=False,
    )
    food_id = Column(
        BigIntId,
        ForeignKey("food_library.id", ondelete="CASCADE"),
        nullable=False,
    )
    quantity = Column(Text)
    notes = Column(Text)

    meal = relationship("Meal", back_populates="items")
    food = relationship("FoodItem")
