from fastapi import APIRouter, HTTPException, Depends, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from services.auth_svc import register_user, login_user, decode_session_token, public_user, AuthError
from services.storage_svc import Storage, get_storage
from dtos.auth_dtos import RegisterRequest, LoginRequest, UserResponse, LoginResponse

router = APIRouter()

security_scheme = HTTPBearer()


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED, summary="Register new user")
def register(req: RegisterRequest, storage: Storage = Depends(get_storage)):
    try:
        return register_user(storage, req.username, req.password, user_id=req.id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/login", response_model=LoginResponse, summary="Log in and receive a session token")
def login(req: LoginRequest, storage: Storage = Depends(get_storage)):
    try:
        return login_user(storage, req.username, req.password)
    except AuthError as e:
        raise HTTPException(status_code=401, detail=str(e))


@router.get("/me", response_model=UserResponse, summary="Current user from a session token")
def me(
    credentials: HTTPAuthorizationCredentials = Depends(security_scheme),
    storage: Storage = Depends(get_storage),
):
    claims = decode_session_token(credentials.credentials)
    if not claims:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    user = storage.get_user(claims["uid"])
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return public_user(user)
