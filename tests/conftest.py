"""Shared test fixtures."""

from __future__ import annotations

import pytest

from svgshapes.engine.diagnostics import DiagnosticCollector


# Sample SVGs

CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="#000000" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

SMILEY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="#000000" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
  <circle cx="8" cy="9" r="1"/>
  <circle cx="16" cy="9" r="1"/>
  <path d="M8 14s1.5 2 4 2 4-2 4-2"/>
</svg>'''

HOME_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="#000000" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <path d="M15 21v-8a1 1 0 0 0-1-1h-4a1 1 0 0 0-1 1v8"/>
  <path d="M3 10a2 2 0 0 1 .709-1.528l7-5.999a2 2 0 0 1 2.582 0l7 5.999A2 2 0 0 1 21 10v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"/>
</svg>'''

BAR_CHART_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="#000000" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <line x1="18" x2="18" y1="20" y2="10"/>
  <line x1="12" x2="12" y1="20" y2="4"/>
  <line x1="6" x2="6" y1="20" y2="14"/>
</svg>'''

FILLED_RECT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <rect x="10" y="10" width="80" height="80" fill="#4ECDC4"/>
  <circle cx="50" cy="50" r="20" fill="#FF6B6B"/>
</svg>'''

# Full-canvas rect without explicit paint, inheriting a fill from the root
BACKGROUND_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="200" height="100" fill="#FFFFFF" stroke="#000000" stroke-width="3">
  <rect x="0" y="0" width="200" height="100"/>
  <circle cx="100" cy="50" r="20" fill="#FF0000"/>
</svg>'''

CLASS_STYLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 64 64">
  <style>
    .outline { stroke: #112233; stroke-width: 4; fill: none }
    .accent { stroke: #AA0000 }
  </style>
  <rect class="outline accent" x="8" y="8" width="16" height="16"/>
  <rect class="outline" x="32" y="8" width="16" height="16" stroke="#00FF00"/>
  <rect class="outline" x="8" y="32" width="16" height="16" style="stroke:#0000FF"/>
</svg>'''

USE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" viewBox="0 0 100 100">
  <defs>
    <rect id="tile" x="0" y="0" width="10" height="10"/>
  </defs>
  <use href="#tile" x="20" y="30" fill="#336699"/>
  <use xlink:href="#tile" x="50" y="50" fill="#336699"/>
</svg>'''

TRANSFORM_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 200 200">
  <g transform="translate(100,50)" fill="#00FF00">
    <rect x="0" y="0" width="10" height="20" transform="scale(2)"/>
  </g>
</svg>'''


@pytest.fixture
def circle_svg() -> str:
    return CIRCLE_SVG


@pytest.fixture
def smiley_svg() -> str:
    return SMILEY_SVG


@pytest.fixture
def background_svg() -> str:
    return BACKGROUND_SVG


@pytest.fixture
def collector() -> DiagnosticCollector:
    return DiagnosticCollector()
