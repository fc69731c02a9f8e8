from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
import logging

from globetrotter.database import get_db
from globetrotter.models.user import User
from globetrotter.schemas.user import UserCreate, UserUpdate, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_user_or_404(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.post("/api/users", status_code=201)
async def create_user(user: UserCreate, db: Session = Depends(get_db)):
    email = user.email.strip().lower()
    if "@" not in email:
        raise HTTPException(status_code=400, detail="Please enter a valid email")

    existing = db.query(User).filter(User.email == email).first()
    if existing:
        raise HTTPException(status_code=400, detail="User with this email already exists")

    new_user = User(**{**user.model_dump(), "email": email})
    db.add(new_user)
    db.commit()
    db.refresh(new_user)

    logger.info(f"Created user {new_user.id}")
    return UserResponse.model_validate(new_user)


@router.get("/api/users/{user_id}")
async def get_user(user_id: int, db: Session = Depends(get_db)):
    return UserResponse.model_validate(_get_user_or_404(db, user_id))


@router.put("/api/users/{user_id}")
async def update_user(user_id: int, updates: UserUpdate, db: Session = Depends(get_db)):
    user = _get_user_or_404(db, user_id)

    for field, value in updates.model_dump(exclude_unset=True).items():
        setattr(user, field, value)

    db.commit()
    db.refresh(user)
    return UserResponse.model_validate(user)
