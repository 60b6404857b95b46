import logging
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from papaya.core.config import settings
from papaya.recs.client import RecommenderClient
from papaya.recs.config import FeedConfig
from papaya.routers import feed, liked, looks, profile, saved
from papaya.services.feed import FeedService


@asynccontextmanager
async def lifespan(app: FastAPI):
    recommender = RecommenderClient(
        settings.RECOMMENDER_URL,
        timeout_s=settings.RECOMMENDER_TIMEOUT_S,
        api_key=settings.RECOMMENDER_API_KEY,
    )
    app.state.recommender = recommender
    app.state.feed_service = FeedService(
        recommender,
        FeedConfig(
            rec_limit=settings.FEED_REC_LIMIT,
            wardrobe_limit=settings.FEED_WARDROBE_LIMIT,
            fallback_limit=settings.FEED_FALLBACK_LIMIT,
        ),
    )
    yield
    await recommender.aclose()


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

# CORS
origins = settings.cors_origin_list
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

prefix = settings.API_PREFIX
app.include_router(feed.router, prefix=prefix)
app.include_router(looks.router, prefix=prefix)
app.include_router(saved.router, prefix=prefix)
app.include_router(liked.router, prefix=prefix)
app.include_router(profile.router, prefix=prefix)

logger = logging.getLogger("papaya.requests")

@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration_ms = (time.time() - start) * 1000
    logger.info("%s %s %s %.1fms", request.method, request.url.path, response.status_code, duration_ms)
    return response

@app.get("/")
async def root():
    return {"name": settings.APP_NAME, "env": settings.APP_ENV}
