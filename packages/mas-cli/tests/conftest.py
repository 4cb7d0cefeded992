import json
import logging

import pytest
from click.testing import CliRunner
from mas_core.codebase.deprecation import DeprecationConfig, reset_emitted, set_deprecation_config


@pytest.fixture(autouse=True)
def isolated_process_state():
    """The CLI installs a log handler and deprecation config; undo both."""
    reset_emitted()
    yield
    logger = logging.getLogger("mas")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    set_deprecation_config(DeprecationConfig())
    reset_emitted()


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def report_doc():
    return {
        "project": "github.com/example/widget",
        "version": "v1.2.0",
        "phase": "PHASE 1: REVIEW",
        "teams": [
            {
                "id": "security",
                "name": "security-review",
                "depends_on": ["qa"],
                "tasks": [
                    {"id": "sql-injection", "status": "NO-GO", "severity": "critical", "detail": "SQL injection"},
                    {"id": "vuln-scan", "status": "WARN", "detail": "2 findings"},
                ],
            },
            {"id": "qa", "depends_on": ["pm"], "tasks": [{"id": "unit-tests", "status": "GO"}]},
            {"id": "pm", "tasks": [{"id": "scope", "status": "GO"}]},
        ],
        "generated_at": "2026-02-12T10:00:00Z",
    }


@pytest.fixture
def report_file(tmp_path, report_doc):
    path = tmp_path / "report.json"
    path.write_text(json.dumps(report_doc))
    return path
