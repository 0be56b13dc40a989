from __future__ import annotations

from product_specifications.demo import build_catalogue, format_products, main


def test_main_prints_scenario(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "[small green frog, small red strawberry]",
        "Generic Solution: [small green frog, small red strawberry]",
        "Multiple Spec Result: [small red strawberry]",
    ]


def test_build_catalogue_returns_fresh_list():
    first = build_catalogue()
    first.clear()
    assert len(build_catalogue()) == 3


def test_format_empty():
    assert format_products([]) == "[]"
