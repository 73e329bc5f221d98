# Copyright 2025 msq
"""坐标校验、半径分级与展示格式化。"""

from __future__ import annotations

import math
from typing import Literal, Tuple

from disaster_console.errors import ValidationError

SeverityLevel = Literal["critical", "high", "medium", "low"]
MapSeverity = Literal["high", "medium", "low", "resolved"]

INVALID_COORDINATES_MESSAGE = "Please enter valid latitude and longitude values."
COORDINATE_RANGE_MESSAGE = "Latitude must be between -90 and 90, longitude between -180 and 180."


def validate_coordinates(lat: float, lng: float) -> Tuple[float, float]:
    """校验纬度 [-90, 90]、经度 [-180, 180]，返回 (lat, lng)。"""
    if lat is None or lng is None or math.isnan(lat) or math.isnan(lng):
        raise ValidationError(INVALID_COORDINATES_MESSAGE)
    if lat < -90 or lat > 90 or lng < -180 or lng > 180:
        raise ValidationError(COORDINATE_RANGE_MESSAGE)
    return float(lat), float(lng)


def parse_coordinates(lat_text: str, lng_text: str) -> Tuple[float, float]:
    """解析手工输入的坐标文本。"""
    try:
        lat = float(str(lat_text).strip())
        lng = float(str(lng_text).strip())
    except ValueError as exc:
        raise ValidationError(INVALID_COORDINATES_MESSAGE) from exc
    return validate_coordinates(lat, lng)


def severity_from_radius(radius_km: float) -> SeverityLevel:
    """灾害告警列表使用的四级分级（单位：公里）。"""
    if radius_km >= 10:
        return "critical"
    if radius_km >= 5:
        return "high"
    if radius_km >= 2:
        return "medium"
    return "low"


def map_severity_from_radius(radius_km: float, *, active: bool = True) -> MapSeverity:
    """地图与仪表盘使用的三级分级；非活跃灾害显示为 resolved。"""
    if not active:
        return "resolved"
    if radius_km >= 10:
        return "high"
    if radius_km >= 5:
        return "medium"
    return "low"


def format_coordinates(lat: float, lng: float) -> str:
    return f"{lat:.4f}, {lng:.4f}"


def format_distance(kilometers: float) -> str:
    if kilometers >= 1:
        return f"{kilometers:g} km"
    return f"{kilometers * 1000:g} m"
