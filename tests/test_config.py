"""Tests for walk configuration."""

import unittest

from treeish import DepthConfig, LinkBehavior, WalkBehavior


class TestDepthConfig(unittest.TestCase):

    def test_unbounded(self):
        depth = DepthConfig()
        self.assertTrue(depth.should_yield(0))
        self.assertTrue(depth.should_yield(100))
        self.assertTrue(depth.should_explore(100))

    def test_bounds(self):
        depth = DepthConfig(min_depth=1, max_depth=2)
        self.assertFalse(depth.should_yield(0))
        self.assertTrue(depth.should_yield(1))
        self.assertTrue(depth.should_yield(2))
        self.assertFalse(depth.should_yield(3))
        self.assertTrue(depth.should_explore(1))
        self.assertFalse(depth.should_explore(2))


class TestWalkBehavior(unittest.TestCase):

    def test_defaults(self):
        behavior = WalkBehavior()
        self.assertEqual(behavior.depth, DepthConfig())
        self.assertIs(behavior.link, LinkBehavior.READ_FILE)
        self.assertFalse(behavior.follows_links())
        self.assertEqual(behavior.validate(), [])

    def test_bounded(self):
        behavior = WalkBehavior.bounded(min_depth=1, max_depth=3, link=LinkBehavior.READ_TARGET)
        self.assertEqual(behavior.depth, DepthConfig(min_depth=1, max_depth=3))
        self.assertTrue(behavior.follows_links())

    def test_shallow(self):
        self.assertEqual(WalkBehavior.shallow().depth.max_depth, 1)
        self.assertEqual(WalkBehavior.shallow(3).depth.max_depth, 3)

    def test_validate(self):
        self.assertIn(
            "min_depth cannot be negative",
            WalkBehavior.bounded(min_depth=-1).validate(),
        )
        self.assertIn(
            "max_depth cannot be negative",
            WalkBehavior.bounded(max_depth=-1).validate(),
        )
        self.assertIn(
            "max_depth cannot be less than min_depth",
            WalkBehavior.bounded(min_depth=3, max_depth=2).validate(),
        )

    def test_validate_link(self):
        errors = WalkBehavior(link="follow").validate()
        self.assertEqual(errors, ["link must be a LinkBehavior, not str"])


if __name__ == "__main__":
    unittest.main()
