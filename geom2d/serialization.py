"""
Plain-data documents for shapes.

Documents are loaded with adaptix and then passed through the shapes'
own constructors, so a loaded shape is exactly as valid as a built one.
"""
import logging
from typing import Union

from adaptix import Retort
from adaptix.load_error import MsgLoadError
from attr import frozen

from geom2d.aabb import Aabb
from geom2d.angle import Angle
from geom2d.polygon import Polygon
from geom2d.vector import Vector


logger = logging.getLogger(__name__)


@frozen
class VectorData:
    x: float
    y: float


@frozen
class AngleData:
    radians: float


@frozen
class AabbData:
    min: VectorData
    max: VectorData


@frozen
class PolygonData:
    vertices: list[VectorData]


Shape = Union[Aabb, Polygon]
ShapeData = Union[AabbData, PolygonData]


SHAPES: dict[type[ShapeData], str] = {
    AabbData: "aabb",
    PolygonData: "polygon",
}

SHAPE_KINDS: dict[str, type[ShapeData]] = {kind: cls for cls, kind in SHAPES.items()}

###


retort = Retort()


def vector_to_data(vector: Vector) -> VectorData:
    return VectorData(vector.x, vector.y)


def vector_from_data(data: VectorData) -> Vector:
    return Vector(data.x, data.y)


def shape_to_data(shape: Shape) -> ShapeData:
    match shape:
        case Aabb(lo, hi):
            return AabbData(vector_to_data(lo), vector_to_data(hi))
        case Polygon(vertices):
            return PolygonData([vector_to_data(v) for v in vertices])
    raise TypeError(f"Cannot serialize {type(shape).__name__}")


def shape_from_data(data: ShapeData) -> Shape:
    match data:
        case AabbData(lo, hi):
            return Aabb(vector_from_data(lo), vector_from_data(hi))
        case PolygonData(vertices):
            return Polygon(vector_from_data(v) for v in vertices)
    raise TypeError(f"Cannot build a shape from {type(data).__name__}")


def dump_shape(shape: Shape) -> object:
    data = shape_to_data(shape)
    kind = SHAPES[type(data)]
    logger.debug("Dumping %s", kind)
    return {
        "type": kind,
        **retort.dump(data, type(data)),
    }


def load_shape(message: object) -> Shape:
    """
    Build a shape from a `{"type": ..., ...}` mapping.

    Raises an adaptix `LoadError` for malformed documents and
    `ValidationError` for well-formed documents describing invalid geometry.
    """
    match message:
        case {"type": str(kind), **rest}:
            if data_class := SHAPE_KINDS.get(kind):
                data = retort.load(rest, data_class)
                logger.debug("Loaded %s document", kind)
                return shape_from_data(data)
            else:
                raise MsgLoadError(f"Unknown shape kind {kind!r}", message)
    raise MsgLoadError("Invalid shape structure", message)


def dump_angle(angle: Angle) -> object:
    return retort.dump(AngleData(angle.radians))


def load_angle(message: object) -> Angle:
    return Angle(retort.load(message, AngleData).radians)
