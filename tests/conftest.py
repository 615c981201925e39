"""
Pytest configuration for graph algorithm tests.

IMPL selects how CLI-level tests reach the algorithms:
  python - call the command table in-process (default)
  cli    - run ``python -m graphalgos`` in a subprocess
"""
import json
import os
import random
import subprocess
import sys

import pytest

from graphalgos import Graph

IMPL = os.environ.get("IMPL", "python")

if IMPL in ("python", "py"):
    IMPL = "python"


def load_python_impl():
    """Call the CLI command table directly, with a JSON round trip."""
    from graphalgos.cli import COMMANDS

    class PyBridge:
        def call(self, cmd, *args):
            payload = json.loads(json.dumps(list(args)))
            return json.loads(json.dumps(COMMANDS[cmd](payload)))

    return PyBridge()


def load_cli_impl():
    """Run the CLI in a subprocess, as an external caller would."""
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    py_dir = os.path.join(base_dir, "py")

    class CLIBridge:
        def call(self, cmd, *args):
            env = dict(os.environ)
            env["PYTHONPATH"] = py_dir + os.pathsep + env.get("PYTHONPATH", "")
            result = subprocess.run(
                [sys.executable, "-m", "graphalgos", cmd],
                input=json.dumps(list(args)),
                capture_output=True,
                text=True,
                env=env,
            )
            if result.returncode != 0:
                raise RuntimeError(result.stdout + result.stderr)
            return json.loads(result.stdout)

    return CLIBridge()


@pytest.fixture
def lib():
    """Load the bridge selected by the IMPL env var."""
    if IMPL == "python":
        return load_python_impl()
    elif IMPL == "cli":
        return load_cli_impl()
    else:
        raise ValueError(f"Unknown implementation: {IMPL}")


@pytest.fixture
def diamond():
    """Vertices 1..4 with a short route 1->2->3 and a heavy shortcut 1->3."""
    return Graph.from_edges([(1, 2, 1), (2, 3, 1), (1, 3, 5), (3, 4, 1)])


@pytest.fixture
def random_graph():
    """Factory for seeded random directed graphs over vertices 1..n."""
    def build(seed, n=6, p=0.3, low=0, high=9):
        rng = random.Random(seed)
        edges = [
            (u, v, rng.randint(low, high))
            for u in range(1, n + 1)
            for v in range(1, n + 1)
            if u != v and rng.random() < p
        ]
        return Graph.from_edges(edges, range(1, n + 1))
    return build
