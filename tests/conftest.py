import os
import sys
from pathlib import Path

# Keep test runs from writing log files into the working tree
os.environ.setdefault("TODO_ENABLE_FILE_LOGGING", "false")
os.environ.setdefault("TODO_LOG_LEVEL", "WARNING")

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest
from fastapi.testclient import TestClient

from todo_manager.config import ServerConfig
from todo_manager.store import JsonTaskStore, RedisTaskStore

from fakes import FakeRedis


@pytest.fixture()
def store_dir(tmp_path: Path) -> Path:
    return tmp_path / "todos"


@pytest.fixture()
def json_store(store_dir: Path) -> JsonTaskStore:
    return JsonTaskStore(str(store_dir))


@pytest.fixture()
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture()
def redis_store(fake_redis: FakeRedis) -> RedisTaskStore:
    return RedisTaskStore(fake_redis, namespace="test")


@pytest.fixture()
def server_config(store_dir: Path) -> ServerConfig:
    return ServerConfig(store_url=f"file://{store_dir}", cors_origins=["http://localhost:5173"])


@pytest.fixture()
def client(server_config: ServerConfig, json_store: JsonTaskStore) -> TestClient:
    from web.server import create_app

    return TestClient(create_app(config=server_config, store=json_store))
