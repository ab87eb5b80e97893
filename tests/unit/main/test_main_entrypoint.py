from __future__ import annotations

import runpy


def test_main_module_runs_uvicorn(monkeypatch):
    executed = {}

    def fake_run(app, **kwargs) -> None:
        executed["app"] = app
        executed.update(kwargs)

    monkeypatch.setenv("HOST_PORT", "5001")
    monkeypatch.setattr("uvicorn.run", fake_run)

    runpy.run_module("techstacks.main.__main__", run_name="__main__")

    assert executed["app"] == "techstacks.main.app:create_app"
    assert executed["factory"] is True
    assert executed["port"] == 5001
