"""Pytest configuration for conformance tests."""

import pytest
import yaml

from tests.conformance.runners.pyyaml_runner import PyYamlRunner


def get_available_runners():
    """Return list of available conformance runners."""
    runners = [PyYamlRunner("pyyaml", yaml.SafeLoader)]
    if yaml.__with_libyaml__:
        runners.append(PyYamlRunner("libyaml", yaml.CSafeLoader))
    return runners


@pytest.fixture(params=get_available_runners(), ids=lambda r: r.name)
def runner(request):
    """Provide a parser runner for testing.

    This fixture is parametrized to run tests against all available runners:
    - pyyaml: PyYAML's pure-Python safe loader
    - libyaml: PyYAML's safe loader backed by libyaml, when compiled in
    """
    return request.param


@pytest.fixture
def matrix_root(tmp_path):
    """Empty directory to write fixture cases into."""
    root = tmp_path / "matrix"
    root.mkdir()
    return root
