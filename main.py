# main.py
import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from formatter import format_text_to_html
from models import ChatRequest, ChatResponse, ErrorResponse, HealthStatus
from settings import Settings, get_settings
from upstream import ChatGenerator, GeminiGenerator

logging.basicConfig(
    level=get_settings().LOG_LEVEL.upper(),
    format="[%(asctime)s] %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger("chat_relay")

router = APIRouter()


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_generator(request: Request) -> ChatGenerator:
    return request.app.state.generator


@router.get("/", include_in_schema=False)
def index(settings: Settings = Depends(get_app_settings)):
    page = Path(settings.STATIC_DIR) / "index.html"
    if not page.is_file():
        raise HTTPException(status_code=404, detail="Client bundle not installed")
    return FileResponse(page)


@router.get("/healthz", response_model=HealthStatus)
def healthz(settings: Settings = Depends(get_app_settings)):
    return HealthStatus(ok=True, model=settings.MODEL_NAME)


@router.post(
    "/api/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def chat(
    req: ChatRequest,
    settings: Settings = Depends(get_app_settings),
    generator: ChatGenerator = Depends(get_generator),
):
    turns = req.conversation
    if settings.MAX_HISTORY_TURNS > 0:
        turns = turns[-settings.MAX_HISTORY_TURNS:]
    contents = [turn.to_content() for turn in turns]

    logger.info(
        "Incoming chat: turns=%s sent=%s model=%s",
        len(req.conversation),
        len(contents),
        settings.MODEL_NAME,
    )

    try:
        text = generator.generate(contents)
    except Exception as e:
        logger.exception("Generation failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e))

    logger.info("Model responded with %s chars", len(text))
    return ChatResponse(result=text, html=format_text_to_html(text.strip()))


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    problems = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        problems.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    message = "Invalid conversation payload: " + "; ".join(problems)
    logger.warning(message)
    return JSONResponse(status_code=400, content={"error": message})


def create_app(
    settings: Optional[Settings] = None,
    generator: Optional[ChatGenerator] = None,
) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="Gemini Chat Relay", version="1.0.0")

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.generator = generator or GeminiGenerator(settings)

    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.include_router(router)

    # --- Client bundle ---
    static_dir = Path(settings.STATIC_DIR)
    if static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")
    else:
        logger.warning("Static directory %s not found, client bundle disabled", static_dir)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    logger.info("Server ready on http://localhost:%s", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
