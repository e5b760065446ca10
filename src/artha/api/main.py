from fastapi import APIRouter

from artha.api.routes import auth, feedback, translate, translations, users

# Mounted under settings.API_PREFIX
api_router = APIRouter()
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(translations.router)
api_router.include_router(feedback.router)

# Mounted at the application root
public_router = APIRouter()
public_router.include_router(translate.router)
