"""
Authentication routes
Handles login, registration, email confirmation and session restore
"""
from fastapi import APIRouter
from api.auth import (
    Token, LoginRequest, UserResponse, RegisterRequest, RegisterResponse,
    ConfirmEmailRequest, ProfileUpdateRequest, login_for_access_token,
    register_user, confirm_email, to_user_response
)
from api.dependencies import CurrentUser, DBSession
from models.database_models import UserRole
from models.database_service import update_user

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


@router.post("/login", response_model=Token)
async def login(login_data: LoginRequest, db: DBSession):
    """Login endpoint"""
    return login_for_access_token(db, login_data)


@router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(register_data: RegisterRequest, db: DBSession):
    """Register a new user"""
    user = register_user(db, register_data.email, register_data.password,
                         register_data.full_name, UserRole.USER)
    if user.email_confirmed:
        message = "Account created successfully"
    else:
        message = "Account created. Check your email to confirm your address before logging in."
    return RegisterResponse(user=to_user_response(user), message=message)


@router.post("/confirm-email", response_model=UserResponse)
async def confirm_email_endpoint(payload: ConfirmEmailRequest, db: DBSession):
    """Confirm the email address behind a confirmation token"""
    return to_user_response(confirm_email(db, payload.token))


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(current_user: CurrentUser):
    """Restore the session for the bearer token"""
    return to_user_response(current_user)


@router.put("/me", response_model=UserResponse)
async def update_current_user(payload: ProfileUpdateRequest, current_user: CurrentUser, db: DBSession):
    """Update profile information"""
    user = update_user(db, current_user, full_name=payload.full_name)
    return to_user_response(user)
