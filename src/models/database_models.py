"""
SQLAlchemy database models for Practice Tracker
"""
import enum
from sqlalchemy import Column, Integer, String, Text, DateTime, Date, ForeignKey, Boolean, JSON, Enum
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func

Base = declarative_base()

# ============= USER MANAGEMENT =============

class UserRole(str, enum.Enum):
    ADMIN = "admin"
    USER = "user"

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    full_name = Column(String(255), nullable=False)
    role = Column(Enum(UserRole), nullable=False, default=UserRole.USER)
    is_active = Column(Boolean, default=True)
    email_confirmed = Column(Boolean, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    problems = relationship("Problem", back_populates="user", cascade="all, delete-orphan")
    notes = relationship("Note", back_populates="user", cascade="all, delete-orphan")

# ============= PROBLEM TRACKING =============

class Difficulty(str, enum.Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"

class ProblemStatus(str, enum.Enum):
    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    FAILED = "Failed"

class Problem(Base):
    __tablename__ = "problems"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(500), nullable=False)
    difficulty = Column(Enum(Difficulty, values_callable=lambda e: [m.value for m in e]), nullable=False)
    category = Column(String(100), nullable=False)
    url = Column(String(1000), default="")
    description = Column(Text, default="")
    status = Column(
        Enum(ProblemStatus, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=ProblemStatus.NOT_STARTED,
    )
    attempts = Column(Integer, default=0)
    notes = Column(Text, default="")
    solution = Column(Text, default="")
    language = Column(String(50), default="")
    time_complexity = Column(String(100), default="")
    space_complexity = Column(String(100), default="")
    tags = Column(JSON, default=list)
    is_starred = Column(Boolean, default=False)
    completed_at = Column(DateTime(timezone=True))
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="problems")
    analyses = relationship("AIAnalysis", back_populates="problem", cascade="all, delete-orphan")

# ============= NOTES =============
class Note(Base):
    __tablename__ = "notes"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    # Linked to problems.id by convention only
    problem_id = Column(Integer, nullable=True)
    content = Column(Text, nullable=False)
    tags = Column(JSON, default=list)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="notes")

# ============= AI ASSISTANT =============
class AIAnalysis(Base):
    __tablename__ = "ai_analyses"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    problem_id = Column(Integer, ForeignKey("problems.id"), nullable=False, index=True)
    analysis = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    problem = relationship("Problem", back_populates="analyses")

class PracticePlan(Base):
    __tablename__ = "practice_plans"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    plan_date = Column(Date, nullable=False, index=True)
    status = Column(String(50), default="Pending")
    plan = Column(JSON)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

class Recommendation(Base):
    __tablename__ = "recommendations"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    category = Column(String(100), nullable=False)
    difficulty = Column(String(20), nullable=False)
    reason = Column(Text, default="")
    priority = Column(String(20), default="Medium")
    estimated_time = Column(Integer, default=30)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
