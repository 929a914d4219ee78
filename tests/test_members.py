import unittest

from shapemock.members import (
    discard_accessor,
    has_data_descriptor,
    install_accessor,
    install_function,
    is_private_type,
    private_type,
)
from shapemock.mock import MockShapeError, ShapeMeta


class Point:
    origin = (0, 0)

    def __init__(self, x=0, y=0):
        self.x = x
        self.y = y

    @property
    def norm(self):
        return abs(self.x) + abs(self.y)

    def move(self, dx, dy):
        self.x += dx
        self.y += dy


class SlottedPoint:
    __slots__ = ("x", "y")

    def scale(self, factor):
        return (self.x * factor, self.y * factor)


class TestPrivateType(unittest.TestCase):
    """
    Test suite for per-object private types.

    Verifies that a private type:
    1. Is created once and reused.
    2. Keeps the identity of the original class for callers.
    3. Is never shared with other objects of the same class.
    """

    def test_created_once_and_reused(self):
        point = Point()

        owned = private_type(point)

        self.assertIs(type(point), owned)
        self.assertIs(private_type(point), owned)
        self.assertTrue(is_private_type(owned))
        self.assertFalse(is_private_type(Point))

    def test_keeps_class_identity(self):
        point = Point(1, 2)

        private_type(point)

        self.assertIsInstance(point, Point)
        self.assertEqual(type(point).__name__, "Point")
        self.assertEqual(type(point).__qualname__, "Point")
        self.assertEqual(type(point).__module__, Point.__module__)
        self.assertEqual((point.x, point.y), (1, 2))

    def test_not_shared_between_objects(self):
        first, second = Point(), Point()

        self.assertIsNot(private_type(first), private_type(second))
        self.assertIs(type(Point()), Point)

    def test_slotted_instance(self):
        point = SlottedPoint()

        owned = private_type(point)

        self.assertIs(type(point), owned)
        self.assertFalse(hasattr(point, "__dict__"))

    def test_class_with_python_metaclass(self):
        class Shape(metaclass=ShapeMeta):
            pass

        owned = private_type(Shape)

        self.assertIs(type(Shape), owned)
        self.assertTrue(issubclass(owned, ShapeMeta))

    def test_builtin_instance_raises(self):
        with self.assertRaises(MockShapeError):
            private_type(object())

    def test_class_with_type_metaclass_raises(self):
        with self.assertRaises(MockShapeError):
            private_type(Point)


class TestHasDataDescriptor(unittest.TestCase):
    def test_property(self):
        self.assertTrue(has_data_descriptor(Point, "norm"))

    def test_plain_members(self):
        self.assertFalse(has_data_descriptor(Point, "move"))
        self.assertFalse(has_data_descriptor(Point, "origin"))
        self.assertFalse(has_data_descriptor(Point, "missing"))

    def test_slots_are_not_reported(self):
        self.assertFalse(has_data_descriptor(SlottedPoint, "x"))


class TestInstallFunction(unittest.TestCase):
    def test_instance_function_is_not_bound(self):
        point = Point()

        install_function(point, "move", lambda *args: args)

        self.assertEqual(point.move(1, 2), (1, 2))
        self.assertIs(type(point), Point)

    def test_slotted_instance(self):
        point = SlottedPoint()

        install_function(point, "x", lambda: "x")

        self.assertEqual(point.x(), "x")

    def test_slotted_instance_method(self):
        point = SlottedPoint()
        point.x, point.y = 1, 2

        install_function(point, "scale", lambda factor: -factor)

        self.assertEqual(point.scale(3), -3)
        self.assertIsInstance(point, SlottedPoint)
        other = SlottedPoint()
        other.x, other.y = 1, 2
        self.assertEqual(other.scale(3), (3, 6))

    def test_class_function_is_staticmethod(self):
        class Shape:
            pass

        install_function(Shape, "build", lambda *args: args)

        self.assertIsInstance(Shape.__dict__["build"], staticmethod)
        self.assertEqual(Shape.build(1), (1,))
        self.assertEqual(Shape().build(2), (2,))

    def test_shadows_class_property(self):
        point = Point()

        install_function(point, "norm", lambda: -1)

        self.assertEqual(point.norm(), -1)
        self.assertEqual(Point(1, 1).norm, 2)


class TestInstallAccessor(unittest.TestCase):
    def test_instance_accessor(self):
        point = Point()
        written = []

        install_accessor(point, "label", lambda owner: "p", lambda owner, value: written.append(value))
        point.label = "q"

        self.assertEqual(point.label, "p")
        self.assertEqual(written, ["q"])
        self.assertFalse(hasattr(Point(), "label"))

    def test_replaces_own_attribute(self):
        point = Point(3, 4)

        install_accessor(point, "x", lambda owner: 10, lambda owner, value: None)

        self.assertEqual(point.x, 10)
        self.assertNotIn("x", vars(point))

    def test_class_accessor(self):
        class Shape(metaclass=ShapeMeta):
            sides = 3

        install_accessor(Shape, "sides", lambda owner: 4, lambda owner, value: None)
        Shape.sides = 5

        self.assertEqual(Shape.sides, 4)
        self.assertNotIn("sides", Shape.__dict__)

    def test_discard_accessor(self):
        point = Point()
        install_accessor(point, "label", lambda owner: "p", lambda owner, value: None)

        discard_accessor(point, "label")

        self.assertFalse(hasattr(point, "label"))
        discard_accessor(point, "label")


if __name__ == "__main__":
    unittest.main()
