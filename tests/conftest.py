"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages, and
keeps the developer's own config and environment out of every test.
"""

import json
import sys
from collections.abc import Callable, Generator, Sequence
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local smartsearch package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of smartsearch modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("smartsearch"):
        del sys.modules[module_name]


@pytest.fixture(autouse=True)
def isolated_environment(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Generator[None, None, None]:
    """Isolate config sources and restore logging state after each test."""
    import logging
    import os

    import structlog

    from smartsearch.config import loader

    home = tmp_path_factory.mktemp("home")
    monkeypatch.setattr(loader, "GLOBAL_CONFIG_PATH", home / "config.yaml")
    monkeypatch.delenv(loader.VAULT_PATH_ENV, raising=False)
    for key in list(os.environ):
        if key.upper().startswith("SMARTSEARCH__"):
            monkeypatch.delenv(key)

    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def _ajson_line(
    key: str,
    vec: Sequence[float] | None,
    *,
    model_id: str = "TaylorAI/bge-micro-v2",
    trailing_comma: bool = True,
) -> str:
    value: dict[str, object] = {"path": key.split(":", 1)[-1]}
    if vec is not None:
        value["embeddings"] = {model_id: {"vec": list(vec)}}
    line = f"{json.dumps(key)}: {json.dumps(value)}"
    return line + "," if trailing_comma else line


def _write_ajson(vault: Path, name: str, lines: Sequence[str]) -> Path:
    directory = vault / ".smart-env" / "multi"
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def ajson_line() -> Callable[..., str]:
    """Render one Smart Connections record line."""
    return _ajson_line


@pytest.fixture
def write_ajson() -> Callable[[Path, str, Sequence[str]], Path]:
    """Write lines to <vault>/.smart-env/multi/<name>."""
    return _write_ajson


@pytest.fixture
def vault(tmp_path: Path) -> Path:
    """A small vault with notes on disk and one .ajson record file.

    Vectors are chosen so scores against [1, 0, 0] are easy to reason about:
    alpha 1.0, intro block 0.994, gamma 0.707, beta 0.0, delta -1.0.
    """
    root = tmp_path / "vault"
    (root / "notes").mkdir(parents=True)
    (root / "projects").mkdir()
    (root / "notes" / "alpha.md").write_text("# Alpha\n\n## Intro\n\nFirst note.\n")
    (root / "notes" / "beta.md").write_text("# Beta\n")
    (root / "projects" / "gamma.md").write_text("# Gamma\n")
    _write_ajson(
        root,
        "notes.ajson",
        [
            _ajson_line("smart_sources:notes/alpha.md", [1.0, 0.0, 0.0]),
            _ajson_line("smart_sources:notes/beta.md", [0.0, 1.0, 0.0]),
            _ajson_line("smart_sources:projects/gamma.md", [1.0, 1.0, 0.0]),
            _ajson_line("smart_sources:notes/delta.md", [-1.0, 0.0, 0.0]),
            _ajson_line("smart_blocks:notes/alpha.md#Intro", [0.9, 0.1, 0.0]),
        ],
    )
    return root
