import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.routes.analyze import router as analyze_router
from src.api.routes.auth import router as auth_router
from src.api.routes.diagnostics import router as diagnostics_router
from src.api.routes.meetings import router as meetings_router
from src.api.routes.search import router as search_router
from src.api.routes.todos import router as todos_router
from src.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Meeting Notes API",
    description="Meeting transcript analysis, minutes, and todo tracking",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_origin_regex=r"http://localhost:\d+",
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(analyze_router)
app.include_router(meetings_router)
app.include_router(todos_router)
app.include_router(search_router)
app.include_router(auth_router)
if settings.debug_diagnostics:
    app.include_router(diagnostics_router)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
