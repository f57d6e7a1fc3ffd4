import importlib
import os
from pathlib import Path

import homeowners.config
import homeowners.parser
import homeowners.text_processing


def test_importing_parser_creates_no_directories(monkeypatch):
    created = []
    monkeypatch.setattr(os, "makedirs", lambda *args, **kwargs: created.append(args))
    monkeypatch.setattr(Path, "mkdir", lambda self, *args, **kwargs: created.append(self))

    importlib.reload(homeowners.config)
    importlib.reload(homeowners.text_processing)
    importlib.reload(homeowners.parser)

    assert created == []
