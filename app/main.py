import time

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import auth, admin, categories, products, photos
from app.core.errors import register_exception_handlers
from app.utils.cloudinary_utils import CloudinaryMediaHost

from app.core.logging_config import get_logger

logger = get_logger()

app = FastAPI(
    title="Catalog Admin API",
    version="1.0.0",
    description="API for Admins, Categories, Products & Photos"
)

# Media host handle, built once and injected via get_media_host
app.state.media_host = CloudinaryMediaHost.from_env()

register_exception_handlers(app)


# -------- ACCESS LOG --------
@app.middleware("http")
async def access_log(request, call_next):
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception as e:
        logger.error(f"{request.method} {request.url.path} failed: {e}")
        raise

    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)")
    return response


# -------- CORS --------
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -------- ROUTERS --------
app.include_router(auth.router)
app.include_router(admin.router)
app.include_router(categories.router)
app.include_router(products.router)
app.include_router(photos.router)


@app.get("/", tags=["Root"])
def root():
    return {"success": True, "message": "Backend running successfully"}
