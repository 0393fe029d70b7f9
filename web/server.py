"""
Todo API Server

FastAPI-based server providing:
- REST API for task CRUD under /api/todos
- Status filtering (active / completed) on the list and filter routes
- Interactive API documentation at /api-docs
"""

import asyncio
import time
from contextlib import asynccontextmanager
from typing import Any, Callable, List, Optional

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

from todo_manager import __version__
from todo_manager.config import ConfigProperties, ServerConfig
from todo_manager.models import build_status_filter
from todo_manager.store import TaskStore, create_store
from todo_manager.utils.logger import get_logger

logger = get_logger(__name__)


# ============================================================================
# PYDANTIC MODELS
# ============================================================================

class TodoCreate(BaseModel):
    # Presence of text is enforced by the store, not here
    text: Optional[str] = Field(default=None, description="Task description")


class TodoUpdate(BaseModel):
    text: Optional[str] = Field(default=None, description="New task description")
    completed: Optional[bool] = Field(default=None, description="New completion status")


class Todo(BaseModel):
    id: str = Field(description="Auto-generated ID of the todo")
    text: str = Field(description="Task description")
    completed: bool = Field(description="Task completion status")

    model_config = {
        "json_schema_extra": {
            "example": {"id": "3f0c9a4e5b7d4c1a9e2f6b8d0a1c3e5f", "text": "Complete the project", "completed": False}
        }
    }


class ErrorResponse(BaseModel):
    error: str


ERROR_RESPONSES = {500: {"model": ErrorResponse, "description": "Internal server error"}}
NOT_FOUND_RESPONSES = {
    404: {"model": ErrorResponse, "description": "Todo not found"},
    **ERROR_RESPONSES,
}


# ============================================================================
# HELPERS
# ============================================================================

def get_store(request: Request) -> TaskStore:
    store = request.app.state.store
    if store is None:
        raise HTTPException(status_code=500, detail="Store not available")
    return store


async def _run_store(operation: str, func: Callable[..., Any], *args: Any) -> Any:
    """Run a blocking store call in the default executor and time it."""
    started = time.perf_counter()
    loop = asyncio.get_event_loop()
    try:
        result = await loop.run_in_executor(None, func, *args)
    except Exception:
        logger.log_performance(operation, time.perf_counter() - started, success=False)
        raise
    logger.log_performance(operation, time.perf_counter() - started)
    return result


async def _list_tasks(store: TaskStore, status: Optional[str], failure_message: str) -> List[dict]:
    try:
        tasks = await _run_store("find", store.find, build_status_filter(status))
    except Exception as e:
        logger.log_exception(f"{failure_message} (status={status!r})", exc=e)
        raise HTTPException(status_code=500, detail=failure_message)
    return [task.to_dict() for task in tasks]


# ============================================================================
# TODO API
# ============================================================================

router = APIRouter(prefix="/api/todos", tags=["Todos"])


def _status_query():
    return Query(
        default=None,
        description="Filter tasks by their status (active or completed)",
        examples=["active", "completed"],
    )


@router.post("", status_code=201, response_model=Todo, responses=ERROR_RESPONSES,
             summary="Create a new todo")
@router.post("/", status_code=201, response_model=Todo, include_in_schema=False)
async def create_todo(data: TodoCreate, store: TaskStore = Depends(get_store)):
    try:
        task = await _run_store("insert", store.insert, {"text": data.text})
    except Exception as e:
        logger.log_exception("Failed to create todo", exc=e)
        raise HTTPException(status_code=500, detail="Failed to create todo")
    logger.info(f"Todo created: {task.id}")
    return task.to_dict()


@router.get("", response_model=List[Todo], responses=ERROR_RESPONSES, summary="Get all todos")
@router.get("/", response_model=List[Todo], include_in_schema=False)
async def list_todos(status: Optional[str] = _status_query(), store: TaskStore = Depends(get_store)):
    return await _list_tasks(store, status, "Failed to fetch todos")


@router.get("/filter", response_model=List[Todo], responses=ERROR_RESPONSES,
            summary="Filter todos by status")
async def filter_todos(status: Optional[str] = _status_query(), store: TaskStore = Depends(get_store)):
    return await _list_tasks(store, status, "Failed to filter todos")


@router.put("/{todo_id}", response_model=Todo, responses=NOT_FOUND_RESPONSES, summary="Update a todo")
async def update_todo(todo_id: str, data: TodoUpdate, store: TaskStore = Depends(get_store)):
    # Omitted or null fields keep their stored value
    fields = data.model_dump(exclude_none=True)
    try:
        task = await _run_store("update", store.find_by_id_and_update, todo_id, fields)
    except Exception as e:
        logger.log_exception(f"Failed to update todo {todo_id}", exc=e)
        raise HTTPException(status_code=500, detail="Failed to update todo")
    if task is None:
        raise HTTPException(status_code=404, detail="Todo not found")
    logger.info(f"Todo updated: {task.id}", extra={"fields": sorted(fields)})
    return task.to_dict()


@router.delete("/{todo_id}", response_model=Todo, responses=NOT_FOUND_RESPONSES, summary="Delete a todo")
async def delete_todo(todo_id: str, store: TaskStore = Depends(get_store)):
    try:
        task = await _run_store("delete", store.find_by_id_and_delete, todo_id)
    except Exception as e:
        logger.log_exception(f"Failed to delete todo {todo_id}", exc=e)
        raise HTTPException(status_code=500, detail="Failed to delete todo")
    if task is None:
        raise HTTPException(status_code=404, detail="Todo not found")
    logger.info(f"Todo deleted: {task.id}")
    return task.to_dict()


# ============================================================================
# APP SETUP
# ============================================================================

def create_app(config: Optional[ServerConfig] = None, store: Optional[TaskStore] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Server settings; read from the environment if omitted.
        store: Store to serve. If omitted, one is opened from
            ``config.store_url`` at startup and closed at shutdown; a store
            that cannot be opened aborts startup.
    """
    config = config or ServerConfig.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_store = app.state.store is None
        if owns_store:
            app.state.store = create_store(config.store_url)
        logger.info(
            f"Server running on port {config.port} ({app.state.store.backend_name} store)",
            extra=config.to_dict(),
        )
        try:
            yield
        finally:
            if owns_store:
                app.state.store.close()
                app.state.store = None
            logger.info("Server stopped")

    app = FastAPI(
        title="Todo App API",
        description="API documentation for the Todo application",
        version=__version__,
        docs_url=config.docs_url,
        servers=[{"url": f"http://localhost:{config.port}", "description": "Local server"}],
        lifespan=lifespan,
    )
    app.state.store = store
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=config.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Rejected request to {request.url.path}", extra={"errors": exc.errors()})
        return JSONResponse(status_code=422, content={"error": "Invalid request body"})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.log_exception(f"Unhandled error on {request.method} {request.url.path}", exc=exc)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    app.include_router(router)
    return app


ConfigProperties.load_env_file()
app = create_app()


# ============================================================================
# ENTRYPOINT
# ============================================================================

def start_server(host: Optional[str] = None, port: Optional[int] = None, reload: bool = False):
    """Start the API server."""
    import uvicorn

    config: ServerConfig = app.state.config
    host = host or config.host
    port = port or config.port
    if reload:
        uvicorn.run("web.server:app", host=host, port=port, reload=True, log_level="info")
    else:
        uvicorn.run(app, host=host, port=port, log_level="info")


if __name__ == "__main__":
    start_server()
