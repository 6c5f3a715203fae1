"""Canvas component for the top-down field view."""

from __future__ import annotations

import math
from typing import Dict, List, Sequence, Tuple

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QBrush, QColor, QPainter, QPen, QPolygonF
from PySide6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsPolygonItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsView,
    QSizePolicy,
)

from competition_field.config import FieldConfig
from competition_field.core.geometry import Pose2d

# Layer colors, assigned in order of first appearance
LAYER_COLORS = ["#FF8C00", "#D62728", "#2CA02C", "#9467BD", "#8C564B", "#17BECF"]

ROBOT_SIZE_M = 0.9
OBJECT_SIZE_M = 0.36


class FieldCanvas(QGraphicsView):
    """Draws the robot and every dashboard layer on the field rectangle."""

    def __init__(self, config: FieldConfig, parent=None):
        super().__init__(parent)
        self._config = config

        self._scene = QGraphicsScene(self)
        self.setScene(self._scene)

        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setBackgroundBrush(QBrush(QColor(245, 245, 245)))
        self.setFrameShape(QGraphicsView.Shape.NoFrame)

        # Transform parameters
        self._pixels_per_unit = 1.0
        self._offset_x = 0.0
        self._offset_y = 0.0

        self._boundary_item = QGraphicsRectItem()
        self._boundary_item.setPen(QPen(QColor(100, 100, 100), 2, Qt.PenStyle.DashLine))
        self._boundary_item.setBrush(Qt.GlobalColor.transparent)
        self._scene.addItem(self._boundary_item)

        self._robot_item = QGraphicsPolygonItem()
        self._robot_item.setBrush(QBrush(QColor(30, 60, 90)))
        self._robot_item.setPen(QPen(QColor(10, 20, 30), 1))
        self._robot_item.setZValue(10)
        self._scene.addItem(self._robot_item)
        self._robot_pose = Pose2d()

        self._layers: Dict[str, Tuple[Pose2d, ...]] = {}
        self._layer_items: Dict[str, List[QGraphicsEllipseItem]] = {}
        self._layer_colors: Dict[str, QColor] = {}

    def _update_transform(self) -> None:
        """Calculate scale and offsets to fit the field in view."""
        view_rect = self.viewport().rect()
        vw, vh = view_rect.width(), view_rect.height()
        fw, fh = self._config.field_length, self._config.field_width

        if fw == 0 or fh == 0 or vw == 0 or vh == 0:
            return

        padding = 0.95
        self._pixels_per_unit = min((vw * padding) / fw, (vh * padding) / fh)
        self._offset_x = (vw - fw * self._pixels_per_unit) / 2.0
        self._offset_y = (vh - fh * self._pixels_per_unit) / 2.0

        self._scene.setSceneRect(0, 0, vw, vh)

    def field_to_pixel(self, fx: float, fy: float) -> Tuple[float, float]:
        """Convert field coords (Y-up) to pixel coords (Y-down)."""
        px = fx * self._pixels_per_unit + self._offset_x
        py = self._offset_y + (self._config.field_width - fy) * self._pixels_per_unit
        return px, py

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self._update_transform()
        self._redraw()

    def _redraw(self) -> None:
        tl_x, tl_y = self.field_to_pixel(0, self._config.field_width)
        br_x, br_y = self.field_to_pixel(self._config.field_length, 0)
        self._boundary_item.setRect(tl_x, tl_y, br_x - tl_x, br_y - tl_y)
        self._draw_robot()
        for channel in list(self._layers):
            self._draw_layer(channel)

    def set_robot_pose(self, pose: Pose2d) -> None:
        self._robot_pose = pose
        self._draw_robot()

    def set_layer(self, channel: str, poses: Sequence[Pose2d]) -> None:
        """Replace a layer's poses; an empty sequence removes its items."""
        self._layers[channel] = tuple(poses)
        self._draw_layer(channel)

    def _draw_robot(self) -> None:
        # Triangle pointing along heading
        pose = self._robot_pose
        half = ROBOT_SIZE_M / 2.0
        corners = [(half, 0.0), (-half, half), (-half, -half)]
        cos_h, sin_h = math.cos(pose.heading), math.sin(pose.heading)
        polygon = QPolygonF()
        for cx, cy in corners:
            fx = pose.x + cx * cos_h - cy * sin_h
            fy = pose.y + cx * sin_h + cy * cos_h
            polygon.append(QPointF(*self.field_to_pixel(fx, fy)))
        self._robot_item.setPolygon(polygon)

    def _draw_layer(self, channel: str) -> None:
        poses = self._layers.get(channel, ())
        items = self._layer_items.setdefault(channel, [])
        color = self._color_for(channel)

        while len(items) > len(poses):
            self._scene.removeItem(items.pop())
        while len(items) < len(poses):
            item = QGraphicsEllipseItem()
            item.setBrush(QBrush(color))
            item.setPen(QPen(color.darker(150), 1))
            self._scene.addItem(item)
            items.append(item)

        r_px = OBJECT_SIZE_M / 2.0 * self._pixels_per_unit
        for item, pose in zip(items, poses):
            px, py = self.field_to_pixel(pose.x, pose.y)
            item.setRect(px - r_px, py - r_px, r_px * 2, r_px * 2)

    def _color_for(self, channel: str) -> QColor:
        if channel not in self._layer_colors:
            index = len(self._layer_colors) % len(LAYER_COLORS)
            self._layer_colors[channel] = QColor(LAYER_COLORS[index])
        return self._layer_colors[channel]
