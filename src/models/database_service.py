"""
Database service functions for CRUD operations
"""
from datetime import date, datetime, timezone
from sqlalchemy.orm import Session
from sqlalchemy import or_
from typing import Dict, List, Optional
from loguru import logger
from .database_models import (
    User, UserRole, Problem, ProblemStatus, Note, AIAnalysis, PracticePlan, Recommendation
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)

# User operations
def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()

def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()

def create_user(db: Session, email: str, hashed_password: str, full_name: str,
                role: UserRole = UserRole.USER, email_confirmed: bool = False) -> User:
    user = User(
        email=email,
        hashed_password=hashed_password,
        full_name=full_name,
        role=role,
        email_confirmed=email_confirmed
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info(f"User created: {user.email} (ID: {user.id})")
    return user

def update_user(db: Session, user: User, full_name: str = None,
                email_confirmed: bool = None, role: UserRole = None) -> User:
    if full_name is not None:
        user.full_name = full_name
    if role is not None:
        user.role = role
    if email_confirmed is not None:
        user.email_confirmed = email_confirmed
    db.commit()
    db.refresh(user)
    return user

# Problem operations
def get_problems_by_user(db: Session, user_id: int) -> List[Problem]:
    return (
        db.query(Problem)
        .filter(Problem.user_id == user_id)
        .order_by(Problem.created_at.desc(), Problem.id.desc())
        .all()
    )

def get_problem_by_id(db: Session, problem_id: int, user_id: int) -> Optional[Problem]:
    return (
        db.query(Problem)
        .filter(Problem.id == problem_id, Problem.user_id == user_id)
        .first()
    )

def search_problems(db: Session, query: str, user_id: int) -> List[Problem]:
    pattern = f"%{query}%"
    return (
        db.query(Problem)
        .filter(Problem.user_id == user_id)
        .filter(or_(Problem.title.ilike(pattern), Problem.category.ilike(pattern)))
        .order_by(Problem.created_at.desc(), Problem.id.desc())
        .all()
    )

def create_problem(db: Session, user_id: int, data: Dict) -> Problem:
    problem = Problem(user_id=user_id, **data)
    if problem.status == ProblemStatus.COMPLETED and problem.completed_at is None:
        problem.completed_at = _utcnow()
    db.add(problem)
    db.commit()
    db.refresh(problem)
    logger.info(f"Problem created: {problem.title} (ID: {problem.id}) for user {user_id}")
    return problem

def update_problem(db: Session, problem_id: int, user_id: int, updates: Dict) -> Optional[Problem]:
    problem = get_problem_by_id(db, problem_id, user_id)
    if problem:
        new_status = updates.pop("status", None)
        for field, value in updates.items():
            setattr(problem, field, value)
        if new_status is not None:
            _apply_status(problem, new_status)
        problem.updated_at = _utcnow()
        db.commit()
        db.refresh(problem)
    return problem

def change_problem_status(db: Session, problem_id: int, user_id: int,
                          status: ProblemStatus) -> Optional[Problem]:
    """Status change from the detail view; every change counts as an attempt."""
    problem = get_problem_by_id(db, problem_id, user_id)
    if problem:
        _apply_status(problem, status)
        problem.attempts = (problem.attempts or 0) + 1
        problem.updated_at = _utcnow()
        db.commit()
        db.refresh(problem)
    return problem

def _apply_status(problem: Problem, status: ProblemStatus) -> None:
    status = ProblemStatus(status)
    if status == ProblemStatus.COMPLETED:
        if problem.status != ProblemStatus.COMPLETED or problem.completed_at is None:
            problem.completed_at = _utcnow()
    else:
        problem.completed_at = None
    problem.status = status

def toggle_problem_star(db: Session, problem_id: int, user_id: int) -> Optional[bool]:
    problem = get_problem_by_id(db, problem_id, user_id)
    if problem is None:
        return None
    problem.is_starred = not bool(problem.is_starred)
    db.commit()
    db.refresh(problem)
    return problem.is_starred

def delete_problem(db: Session, problem_id: int, user_id: int) -> bool:
    problem = get_problem_by_id(db, problem_id, user_id)
    if problem:
        db.delete(problem)
        db.commit()
        logger.info(f"Problem deleted: {problem_id} for user {user_id}")
        return True
    return False

# Note operations
def get_notes_by_user(db: Session, user_id: int) -> List[Note]:
    return (
        db.query(Note)
        .filter(Note.user_id == user_id)
        .order_by(Note.created_at.desc(), Note.id.desc())
        .all()
    )

def get_notes_by_problem(db: Session, problem_id: int, user_id: int) -> List[Note]:
    return (
        db.query(Note)
        .filter(Note.user_id == user_id, Note.problem_id == problem_id)
        .order_by(Note.created_at.desc(), Note.id.desc())
        .all()
    )

def get_note_by_id(db: Session, note_id: int, user_id: int) -> Optional[Note]:
    return db.query(Note).filter(Note.id == note_id, Note.user_id == user_id).first()

def create_note(db: Session, user_id: int, content: str, tags: List[str] = None,
                problem_id: int = None) -> Note:
    note = Note(user_id=user_id, content=content, tags=tags or [], problem_id=problem_id)
    db.add(note)
    db.commit()
    db.refresh(note)
    logger.info(f"Note created: {note.id} for user {user_id}")
    return note

def update_note(db: Session, note_id: int, user_id: int, updates: Dict) -> Optional[Note]:
    note = get_note_by_id(db, note_id, user_id)
    if note:
        for field, value in updates.items():
            setattr(note, field, value)
        note.updated_at = _utcnow()
        db.commit()
        db.refresh(note)
    return note

def delete_note(db: Session, note_id: int, user_id: int) -> bool:
    note = get_note_by_id(db, note_id, user_id)
    if note:
        db.delete(note)
        db.commit()
        return True
    return False

# AI analysis operations
def save_analysis(db: Session, problem_id: int, analysis: str, user_id: int) -> AIAnalysis:
    record = AIAnalysis(problem_id=problem_id, analysis=analysis, user_id=user_id)
    db.add(record)
    db.commit()
    db.refresh(record)
    logger.info(f"AI analysis saved for problem {problem_id} (ID: {record.id})")
    return record

def get_analyses(db: Session, problem_id: int, user_id: int) -> List[AIAnalysis]:
    return (
        db.query(AIAnalysis)
        .filter(AIAnalysis.problem_id == problem_id, AIAnalysis.user_id == user_id)
        .order_by(AIAnalysis.created_at.desc(), AIAnalysis.id.desc())
        .all()
    )

# Practice plan operations
def create_practice_plan(db: Session, user_id: int, plan_date: date, plan: Dict,
                         status: str = "Pending") -> PracticePlan:
    record = PracticePlan(user_id=user_id, plan_date=plan_date, plan=plan, status=status)
    db.add(record)
    db.commit()
    db.refresh(record)
    logger.info(f"Practice plan created for {plan_date} (ID: {record.id})")
    return record

def get_practice_plan(db: Session, plan_id: int, user_id: int) -> Optional[PracticePlan]:
    return (
        db.query(PracticePlan)
        .filter(PracticePlan.id == plan_id, PracticePlan.user_id == user_id)
        .first()
    )

def get_practice_plan_for_date(db: Session, user_id: int, plan_date: date) -> Optional[PracticePlan]:
    return (
        db.query(PracticePlan)
        .filter(PracticePlan.user_id == user_id, PracticePlan.plan_date == plan_date)
        .order_by(PracticePlan.created_at.desc(), PracticePlan.id.desc())
        .first()
    )

def update_practice_plan(db: Session, plan_id: int, user_id: int, status: str = None,
                         focus_areas: List[str] = None) -> Optional[PracticePlan]:
    record = get_practice_plan(db, plan_id, user_id)
    if not record:
        return None
    if status is not None:
        record.status = status
    if focus_areas is not None:
        # reassign so the JSON column is flagged dirty
        record.plan = {**(record.plan or {}), "focus_areas": focus_areas}
    db.commit()
    db.refresh(record)
    logger.info(f"Practice plan {plan_id} updated")
    return record

# Recommendation operations
def replace_recommendations(db: Session, user_id: int, items: List[Dict]) -> List[Recommendation]:
    db.query(Recommendation).filter(Recommendation.user_id == user_id).delete()
    records = [Recommendation(user_id=user_id, **item) for item in items]
    db.add_all(records)
    db.commit()
    for record in records:
        db.refresh(record)
    logger.info(f"Stored {len(records)} recommendations for user {user_id}")
    return records

def get_recommendations(db: Session, user_id: int, category: str = None) -> List[Recommendation]:
    query = db.query(Recommendation).filter(Recommendation.user_id == user_id)
    if category:
        query = query.filter(Recommendation.category == category)
    return query.order_by(Recommendation.id).all()

# Admin operations
def get_overview_counts(db: Session) -> Dict[str, int]:
    return {
        "users": db.query(User).count(),
        "problems": db.query(Problem).count(),
        "completed_problems": db.query(Problem).filter(Problem.status == ProblemStatus.COMPLETED).count(),
        "notes": db.query(Note).count(),
        "ai_analyses": db.query(AIAnalysis).count(),
    }
