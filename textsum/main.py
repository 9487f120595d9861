"""
textsum - FastAPI Backend

API Endpoints:
- GET    /health               - Health check
- POST   /summarize            - Chunked summary of long text
- POST   /summarize/bullets    - Bullet-point summary of short text
- POST   /upload               - Summarize an uploaded document
- POST   /chat                 - Chat with window memory
- DELETE /chat/{session_id}    - Close a chat session
- POST   /embeddings           - Text embedding vector
"""

import uuid
from contextlib import asynccontextmanager
from typing import Dict, List, Optional

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, ValidationError

from .config import CompressionRate, SplitStrategy, SummaryConfig, resolve_model, settings
from .documents import DocumentProcessor
from .errors import AuthenticationError, InputValidationError, LLMError
from .llm import OpenAIClient
from .logger_config import get_logger
from .pipeline import BULLET_CHOICES, BulletSummarizer, ChunkedSummarizer, ConversationSession

logger = get_logger(__name__)


# Global instances
llm_client: Optional[OpenAIClient] = None
doc_processor: Optional[DocumentProcessor] = None
sessions: Dict[str, ConversationSession] = {}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize on startup, cleanup on shutdown."""
    global llm_client, doc_processor

    llm_client = OpenAIClient(
        api_key=settings.openai.api_key,
        base_url=settings.openai.base_url,
        model=settings.openai.model,
        timeout=settings.openai.timeout,
    )
    doc_processor = DocumentProcessor()

    logger.info("textsum ready, model: %s", settings.openai.model)

    yield

    for session in sessions.values():
        session.close()
    sessions.clear()
    logger.info("Shutting down...")


app = FastAPI(
    title="textsum",
    description="Chunked long-text summarization over a chat-completion API",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response Models
class SummarizeRequest(BaseModel):
    text: str
    nch: int = settings.summary.nch
    summary_block: Optional[int] = None
    compression: CompressionRate = CompressionRate.MIDDLE
    final_summary_block: int = settings.summary.final_summary_block
    model: str = settings.summary.model
    temperature: float = settings.summary.temperature
    final_reduction: bool = False
    strategy: SplitStrategy = SplitStrategy.EVEN

    def to_config(self) -> SummaryConfig:
        return SummaryConfig(
            nch=self.nch,
            summary_block=self.summary_block,
            compression=self.compression,
            final_summary_block=self.final_summary_block,
            model=self.model,
            temperature=self.temperature,
            final_reduction=self.final_reduction,
            strategy=self.strategy,
            max_attempts=settings.summary.max_attempts,
            verbose=settings.debug,
        )


class BlockSummaryModel(BaseModel):
    index: int
    text: str
    attempts: int
    within_budget: bool


class SummarizeResponse(BaseModel):
    text_length: int
    block_count: int
    summaries: List[BlockSummaryModel]
    final_summary: Optional[str]
    total_llm_calls: int


class BulletRequest(BaseModel):
    text: str
    bullet_points: int = 6
    model: str = settings.summary.model
    temperature: float = Field(settings.summary.temperature, ge=0, le=1)


class BulletResponse(BaseModel):
    bullet_points: int
    summary: str


class ChatRequest(BaseModel):
    message: str
    session_id: Optional[str] = None
    system_prompt: str = ""
    window_k: int = Field(2, ge=1)


class ChatResponse(BaseModel):
    session_id: str
    response: str
    turns: int


class EmbeddingRequest(BaseModel):
    text: str
    model: str = "text-embedding-3-small"


class EmbeddingResponse(BaseModel):
    model: str
    dimensions: int
    embedding: List[float]


class HealthResponse(BaseModel):
    status: str
    api_connected: bool
    model: str
    sessions: int


def _require_client() -> OpenAIClient:
    if not llm_client:
        raise HTTPException(503, "Not ready")
    return llm_client


def _llm_http_error(e: LLMError) -> HTTPException:
    if isinstance(e, AuthenticationError):
        return HTTPException(401, str(e))
    return HTTPException(502, f"Upstream error: {e}")


def _run_summary(config: SummaryConfig, text: str) -> SummarizeResponse:
    summarizer = ChunkedSummarizer(_require_client(), config)
    try:
        result = summarizer.summarize(text)
    except InputValidationError as e:
        raise HTTPException(400, str(e))
    except LLMError as e:
        raise _llm_http_error(e)
    return SummarizeResponse(**result.to_dict())


# Endpoints
@app.get("/health", response_model=HealthResponse)
def health_check():
    """Check system health."""
    api_ok = llm_client.check_health() if llm_client else False

    return HealthResponse(
        status="healthy" if api_ok else "degraded",
        api_connected=api_ok,
        model=llm_client.model if llm_client else settings.openai.model,
        sessions=len(sessions),
    )


@app.post("/summarize", response_model=SummarizeResponse)
def summarize(request: SummarizeRequest):
    """Summarize long text block by block."""
    try:
        config = request.to_config()
    except ValidationError as e:
        raise HTTPException(400, str(e))
    return _run_summary(config, request.text)


@app.post("/summarize/bullets", response_model=BulletResponse)
def summarize_bullets(request: BulletRequest):
    """Summarize text into bullet points."""
    if request.bullet_points not in BULLET_CHOICES:
        raise HTTPException(400, f"bullet_points must be one of {BULLET_CHOICES}")

    summarizer = BulletSummarizer(
        _require_client(),
        model=resolve_model(request.model),
        temperature=request.temperature,
    )
    try:
        summary = summarizer.summarize(request.text, bullet_points=request.bullet_points)
    except InputValidationError as e:
        raise HTTPException(400, str(e))
    except LLMError as e:
        raise _llm_http_error(e)

    return BulletResponse(bullet_points=request.bullet_points, summary=summary)


@app.post("/upload", response_model=SummarizeResponse)
async def upload_document(
    file: UploadFile = File(...),
    nch: int = Form(settings.summary.nch),
    final_reduction: bool = Form(False),
):
    """Extract the text of a document and summarize it."""
    if not doc_processor:
        raise HTTPException(503, "Not ready")

    content = await file.read()
    if not content:
        raise HTTPException(400, "Empty file")

    try:
        doc = doc_processor.extract(content, file.filename or "unknown.txt")
        config = SummaryConfig(
            nch=nch,
            final_reduction=final_reduction,
            model=settings.summary.model,
            max_attempts=settings.summary.max_attempts,
            verbose=settings.debug,
        )
    except (ValueError, ImportError) as e:
        raise HTTPException(400, f"Error: {e}")

    # Blocking HTTP calls; keep them off the event loop
    return await run_in_threadpool(_run_summary, config, doc.text)


@app.post("/chat", response_model=ChatResponse)
def chat(request: ChatRequest):
    """Send a message to a new or existing chat session."""
    client = _require_client()

    if request.session_id:
        session = sessions.get(request.session_id)
        if session is None:
            raise HTTPException(404, "Session not found")
        session_id = request.session_id
    else:
        session_id = uuid.uuid4().hex[:12]
        session = ConversationSession(
            client,
            system_prompt=request.system_prompt,
            window_k=request.window_k,
            model=settings.summary.model,
        )
        sessions[session_id] = session

    try:
        reply = session.send(request.message)
    except InputValidationError as e:
        raise HTTPException(400, str(e))
    except LLMError as e:
        raise _llm_http_error(e)

    return ChatResponse(session_id=session_id, response=reply, turns=session.turns)


@app.delete("/chat/{session_id}")
def close_chat(session_id: str):
    """Close a chat session."""
    session = sessions.pop(session_id, None)
    if session is None:
        raise HTTPException(404, "Session not found")

    session.close()
    return {"status": "closed", "session_id": session_id}


@app.post("/embeddings", response_model=EmbeddingResponse)
def embeddings(request: EmbeddingRequest):
    """Embed a text."""
    client = _require_client()
    try:
        vector = client.embed(request.text, model=request.model)
    except LLMError as e:
        raise _llm_http_error(e)
    except ValueError as e:
        raise HTTPException(400, str(e))

    return EmbeddingResponse(model=request.model, dimensions=len(vector), embedding=vector)
