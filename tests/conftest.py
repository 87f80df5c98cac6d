import subprocess
import time

import pytest

from bridge_deploy.config_store import ConfigStore
from bridge_deploy.parameters import PARAMETERS


class FakeForge:
    """Stands in for subprocess.run, recording every forge command."""

    def __init__(self):
        self.commands = []
        self.failing = set()
        self.missing = False

    def __call__(self, cmd, **kwargs):
        self.commands.append(list(cmd))
        if self.missing:
            raise FileNotFoundError(2, "No such file or directory", "forge")
        contract = self.contract_of(cmd)
        if contract in self.failing:
            raise subprocess.CalledProcessError(1, cmd, output=f"{contract} reverted")
        return subprocess.CompletedProcess(cmd, 0, stdout=f"{contract} done")

    @staticmethod
    def contract_of(cmd):
        return cmd[2].split(":")[-1]

    @property
    def contracts(self):
        return [self.contract_of(cmd) for cmd in self.commands]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for parameter in PARAMETERS.values():
        # setenv first so teardown also removes values loaded from .env during the test
        monkeypatch.setenv(parameter.env_var, "")
        monkeypatch.delenv(parameter.env_var)


@pytest.fixture(autouse=True)
def no_warning_delay(monkeypatch):
    monkeypatch.setattr(time, "sleep", lambda seconds: None)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def store(tmp_path):
    return ConfigStore(tmp_path / "src" / "script" / ".deploy-config.json")


@pytest.fixture
def no_prompt(monkeypatch):
    def fail(question=""):
        raise AssertionError(f"Unexpected prompt: {question}")

    monkeypatch.setattr("builtins.input", fail)


@pytest.fixture
def answers(monkeypatch):
    """Feed canned answers to input(); returns the list of questions asked."""

    def feed(*values):
        queue = list(values)
        questions = []

        def fake_input(question=""):
            questions.append(question)
            if not queue:
                raise AssertionError(f"No answer left for: {question}")
            return queue.pop(0)

        monkeypatch.setattr("builtins.input", fake_input)
        return questions

    return feed


@pytest.fixture
def fake_forge(monkeypatch):
    forge = FakeForge()
    monkeypatch.setattr(subprocess, "run", forge)
    return forge
