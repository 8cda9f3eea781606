"""
Authentication and Authorization Module
JWT-based authentication for the Practice Tracker API
"""
from datetime import datetime, timedelta, timezone
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import BaseModel, field_validator
from loguru import logger
import os
from sqlalchemy.orm import Session

from models.database import get_db
from models.database_models import User, UserRole
from models.database_service import get_user_by_email, create_user, update_user

# Security configuration
SECRET_KEY = os.getenv("JWT_SECRET_KEY", "your-secret-key-change-this-in-production")
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = 60 * 24  # 24 hours
CONFIRMATION_TOKEN_EXPIRE_HOURS = 48
CONFIRM_EMAIL_PURPOSE = "confirm_email"

# Password hashing
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

# HTTP Bearer token
security = HTTPBearer()


def email_confirmation_required() -> bool:
    return os.getenv("REQUIRE_EMAIL_CONFIRMATION", "true").lower() in ("true", "1", "yes")


class Token(BaseModel):
    access_token: str
    token_type: str


class TokenData(BaseModel):
    email: Optional[str] = None


class UserResponse(BaseModel):
    id: int
    email: str
    full_name: str
    role: str
    is_active: bool
    email_confirmed: bool


class RegisterResponse(BaseModel):
    user: UserResponse
    message: str


class LoginRequest(BaseModel):
    email: str
    password: str


class ConfirmEmailRequest(BaseModel):
    token: str


class ProfileUpdateRequest(BaseModel):
    full_name: str

    @field_validator('full_name')
    @classmethod
    def validate_full_name(cls, v):
        if len(v.strip()) < 2:
            raise ValueError('Full name must be at least 2 characters long')
        return v.strip()


class RegisterRequest(BaseModel):
    email: str
    password: str
    full_name: str

    @field_validator('email')
    @classmethod
    def validate_email(cls, v):
        if '@' not in v:
            raise ValueError('Invalid email format')
        return v.strip().lower()

    @field_validator('password')
    @classmethod
    def validate_password(cls, v):
        if len(v) < 6:
            raise ValueError('Password must be at least 6 characters long')
        return v

    @field_validator('full_name')
    @classmethod
    def validate_full_name(cls, v):
        if len(v.strip()) < 2:
            raise ValueError('Full name must be at least 2 characters long')
        return v.strip()


def to_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,  # type: ignore
        email=user.email,  # type: ignore
        full_name=user.full_name,  # type: ignore
        role=user.role.value,  # type: ignore
        is_active=bool(user.is_active),
        email_confirmed=bool(user.email_confirmed)
    )


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash"""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password"""
    return pwd_context.hash(password)


def get_user(db: Session, email: str) -> Optional[User]:
    """Get user from database"""
    return get_user_by_email(db, email.strip().lower())


def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
    """Authenticate a user"""
    user = get_user(db, email)
    if not user:
        return None
    if not verify_password(password, user.hashed_password):  # type: ignore
        return None
    return user


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create a JWT access token"""
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)
    return encoded_jwt


def create_confirmation_token(email: str) -> str:
    """Create the token sent in the email confirmation link"""
    return create_access_token(
        data={"sub": email, "purpose": CONFIRM_EMAIL_PURPOSE},
        expires_delta=timedelta(hours=CONFIRMATION_TOKEN_EXPIRE_HOURS)
    )


async def get_current_user(credentials: HTTPAuthorizationCredentials = Depends(security), db: Session = Depends(get_db)) -> User:
    """Get current user from JWT token"""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        token = credentials.credentials
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        email: str = payload.get("sub")  # type: ignore
        # Confirmation tokens are not session tokens
        if email is None or payload.get("purpose"):
            raise credentials_exception
        token_data = TokenData(email=email)
    except JWTError:
        raise credentials_exception

    user = get_user(db, email=token_data.email)  # type: ignore
    if user is None:
        raise credentials_exception

    return user


async def get_current_active_user(current_user: User = Depends(get_current_user)) -> User:
    """Get current active user"""
    if not current_user.is_active:  # type: ignore
        raise HTTPException(status_code=400, detail="Inactive user")
    return current_user


def require_role(required_role: str):
    """Dependency factory requiring a specific role"""
    async def role_checker(current_user: User = Depends(get_current_active_user)) -> User:
        if current_user.role.value != required_role and current_user.role.value != UserRole.ADMIN.value:  # type: ignore
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Role '{required_role}' required"
            )
        return current_user
    return role_checker


# Authentication endpoints
def login_for_access_token(db: Session, login_data: LoginRequest) -> Token:
    """Login endpoint logic"""
    user = authenticate_user(db, login_data.email, login_data.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    if email_confirmation_required() and not user.email_confirmed:  # type: ignore
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Please confirm your email address before logging in"
        )
    access_token_expires = timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    access_token = create_access_token(
        data={"sub": user.email}, expires_delta=access_token_expires
    )
    return Token(access_token=access_token, token_type="bearer")


def register_user(db: Session, email: str, password: str, full_name: str, role: UserRole = UserRole.USER) -> User:
    """Register a new user and issue an email confirmation link"""
    existing_user = get_user_by_email(db, email)
    if existing_user:
        raise HTTPException(status_code=400, detail="Email already registered")

    hashed_password = get_password_hash(password)
    user = create_user(db, email, hashed_password, full_name, role,
                       email_confirmed=not email_confirmation_required())

    if not user.email_confirmed:
        token = create_confirmation_token(user.email)  # type: ignore
        base_url = os.getenv("APP_BASE_URL", "http://localhost:3000").rstrip("/")
        # No mail transport; the link is delivered through the log
        logger.info(f"Email confirmation link for {user.email}: {base_url}/confirm-email?token={token}")
    return user


def confirm_email(db: Session, token: str) -> User:
    """Mark the account behind a confirmation token as confirmed"""
    invalid = HTTPException(status_code=400, detail="Invalid or expired confirmation token")
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        raise invalid
    if payload.get("purpose") != CONFIRM_EMAIL_PURPOSE or not payload.get("sub"):
        raise invalid

    user = get_user(db, payload["sub"])
    if user is None:
        raise invalid
    if not user.email_confirmed:
        user = update_user(db, user, email_confirmed=True)
        logger.info(f"Email confirmed: {user.email}")
    return user


def ensure_admin_user(db: Session) -> Optional[User]:
    """Create the admin account from ADMIN_EMAIL / ADMIN_PASSWORD if missing"""
    email = os.getenv("ADMIN_EMAIL")
    password = os.getenv("ADMIN_PASSWORD")
    if not email or not password:
        return None
    email = email.strip().lower()
    user = get_user(db, email)
    if user:
        if user.role != UserRole.ADMIN or not user.email_confirmed:
            user = update_user(db, user, email_confirmed=True, role=UserRole.ADMIN)
            logger.warning(f"Existing account {user.email} promoted to admin")
        return user
    user = create_user(db, email, get_password_hash(password), "Admin",
                       UserRole.ADMIN, email_confirmed=True)
    logger.info(f"Admin account created: {user.email}")
    return user
