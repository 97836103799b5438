"""
Demonstration script tests.
"""

import re
import uuid

import pytest

from scripts.demo import main, run_demo


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("VECTOR_DIMENSION", "VECTOR_TOP_K", "EMBED_SEED", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_run_demo_returns_top_k():
    """One entry per word; the top three come back ranked."""
    results = run_demo("Ceci est un exemple de phrase", dimension=64, top_k=3, seed=1)

    assert len(results) == 3
    scores = [r.score for r in results]
    assert scores == sorted(scores, reverse=True)
    assert all(isinstance(r.id, uuid.UUID) for r in results)
    # Uniform [0, 1) vectors all point into the positive orthant
    assert all(0.0 < s <= 1.0 for s in scores)


def test_run_demo_k_larger_than_phrase():
    """Asking for more results than words returns every word."""
    results = run_demo("two words", dimension=8, top_k=10, seed=2)

    assert len(results) == 2


def test_run_demo_seeded_scores_repeat():
    """Seeded runs give the same scores; ids are fresh each time."""
    first = run_demo("a b c d", dimension=16, top_k=4, seed=3)
    second = run_demo("a b c d", dimension=16, top_k=4, seed=3)

    assert [r.score for r in first] == [r.score for r in second]


def test_main_prints_results(capsys):
    """The CLI prints a header and one line per result."""
    exit_code = main(["--dimension", "32", "--top-k", "2", "--seed", "9"])

    assert exit_code == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[0] == "Top 2 most similar vectors:"
    assert len(lines) == 3
    for line in lines[1:]:
        assert re.fullmatch(r"UUID: [0-9a-f-]{36}, Similarity: -?\d\.\d{4}", line)


def test_main_uses_environment(monkeypatch, capsys):
    """VECTOR_TOP_K sets the default result count."""
    monkeypatch.setenv("VECTOR_TOP_K", "1")

    assert main(["--dimension", "8", "--seed", "4"]) == 0
    assert capsys.readouterr().out.startswith("Top 1 most similar vectors:")


def test_main_rejects_bad_config(monkeypatch, capsys):
    """Invalid configuration exits with status 1."""
    monkeypatch.setenv("VECTOR_DIMENSION", "0")

    assert main([]) == 1
    assert capsys.readouterr().out == ""


def test_main_rejects_negative_k(capsys):
    """A negative --top-k fails cleanly."""
    assert main(["--dimension", "8", "--top-k", "-1"]) == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
