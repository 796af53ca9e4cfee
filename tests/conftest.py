import io
import logging

import pytest

from thinfilmcalc.app.console import Console
from thinfilmcalc.model.library import MaterialLibrary

THREE_FILMS = "SiO2\n1.46\nSi3N4\n2.01\nTa2O5\n2.1\n"


class ScriptedConsole(Console):
    """Console fed from a list of answers; EOFError once they run out."""

    def __init__(self, answers):
        self.buffer = io.StringIO()
        self.prompts = []
        self._answers = iter(answers)
        super().__init__(input_func=self._next_answer, output=self.buffer)

    def _next_answer(self, prompt):
        self.prompts.append(prompt)
        self.buffer.write(prompt)
        try:
            return next(self._answers)
        except StopIteration:
            raise EOFError from None

    @property
    def text(self):
        return self.buffer.getvalue()


@pytest.fixture(autouse=True)
def reset_package_logger():
    """setup_logging attaches handlers to the package logger; detach them."""
    yield
    logger = logging.getLogger("thinfilmcalc")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def library_file(tmp_path):
    path = tmp_path / "films.txt"
    path.write_text(THREE_FILMS, encoding="utf-8")
    return path


@pytest.fixture
def results_file(tmp_path):
    return tmp_path / "data.txt"


@pytest.fixture
def library(library_file):
    return MaterialLibrary.load(str(library_file))


@pytest.fixture
def scripted_console():
    return ScriptedConsole
