"""Shared symbol record fixtures."""
import json
import pytest


@pytest.fixture
def square_record():
    """One 1050 x 1200 body rectangle, all units."""
    return {
        "name": "BOX",
        "draw": [
            {"type": "square", "pos": {"x": -500, "y": 600}, "end": {"x": 550, "y": -600},
             "unit": 0, "convert": 1, "width": 0},
        ],
    }


@pytest.fixture
def multi_unit_record():
    """Body shared by all units plus one pin in each of units 1-3."""
    return {
        "name": "QUAD",
        "drawName": True,
        "drawNums": True,
        "pinNameOffset": 0,
        "draw": [
            {"type": "square", "pos": {"x": 0, "y": 0}, "end": {"x": 100, "y": 100},
             "unit": 0, "convert": 1},
            {"type": "pin", "name": "A", "number": "1", "pos": {"x": 0, "y": 0},
             "length": 100, "orientation": "R", "unit": 1, "convert": 1},
            {"type": "pin", "name": "B", "number": "2", "pos": {"x": 0, "y": 0},
             "length": 100, "orientation": "R", "unit": 2, "convert": 1},
            {"type": "pin", "name": "C", "number": "3", "pos": {"x": 0, "y": 0},
             "length": 100, "orientation": "R", "unit": 3, "convert": 1},
        ],
        "fields": [
            {"index": 0, "text": "U", "pos": {"x": 0, "y": 200}, "size": 50,
             "textOrientation": "H", "horizonalJustify": "L"},
        ],
    }


@pytest.fixture
def display_record():
    """7-segment style symbol: body, segments, pins, arc, circle, text and fields."""
    return {
        "name": "DISP",
        "drawName": True,
        "drawNums": True,
        "pinNameOffset": 40,
        "draw": [
            {"type": "square", "pos": {"x": -500, "y": 600}, "end": {"x": 550, "y": -600},
             "unit": 0, "convert": 1, "width": 0},
            {"type": "polyline", "unit": 0, "convert": 1, "width": 0, "fill": "N",
             "points": [{"x": 0, "y": 0}, {"x": 450, "y": 0}]},
            {"type": "pin", "name": "Segm_E", "number": "1", "pos": {"x": -750, "y": -100},
             "length": 250, "orientation": "R", "numberTextSize": 50, "nameTextSize": 50,
             "unit": 1, "convert": 1, "pinType": "P"},
            {"type": "circle", "pos": {"x": 0, "y": 0}, "radius": 150, "unit": 0,
             "convert": 1, "width": 6},
            {"type": "arc", "pos": {"x": 0, "y": -200}, "radius": 180, "t1": 563, "t2": 1236,
             "unit": 0, "convert": 1, "width": 15,
             "start": {"x": 100, "y": -50}, "end": {"x": -100, "y": -50}},
            {"type": "text", "angle": 0, "pos": {"x": -50, "y": 100}, "size": {"x": 80},
             "text": "DP", "unit": 0, "convert": 0, "horizonalJustify": "C",
             "verticalJustify": "C"},
        ],
        "fields": [
            {"index": 0, "text": "AFF", "pos": {"x": -450, "y": 650}, "size": 50,
             "textOrientation": "H", "textVisible": "V", "horizonalJustify": "L"},
            {"index": 1, "text": "SA15-11", "pos": {"x": 560, "y": 650}, "size": 50,
             "textOrientation": "H", "textVisible": "V", "horizonalJustify": "R"},
        ],
    }


@pytest.fixture
def record_file(tmp_path, display_record):
    """display_record written to a JSON file."""
    path = tmp_path / "disp.json"
    path.write_text(json.dumps(display_record), encoding="utf-8")
    return path
