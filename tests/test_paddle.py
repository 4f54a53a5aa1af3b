"""
Tests for the Paddle entity.
"""

import pytest

from neonbreak.game.entities.paddle import Paddle


@pytest.fixture
def paddle():
    """90px paddle on a 600px screen, 6px per frame."""
    return Paddle(width=90, height=10, y=375, screen_width=600, step=6)


class TestPaddlePosition:
    """Initial placement and geometry."""

    def test_starts_centered(self, paddle):
        """Test that the paddle starts centered."""
        assert paddle.x == 255
        assert paddle.center_x == 300

    def test_rect(self, paddle):
        """Test that rect is (x, y, width, height)."""
        assert paddle.rect == (255, 375, 90, 10)

    def test_covers_is_strict(self, paddle):
        """Test that the paddle edges are not covered."""
        assert paddle.covers(300)
        assert not paddle.covers(255)
        assert not paddle.covers(345)

    def test_reset_recenters(self, paddle):
        """Test that reset() moves the paddle back to center."""
        paddle.update(left=False, right=True)
        paddle.reset()
        assert paddle.x == 255


class TestPaddleMovement:
    """Fixed-step movement and bounds."""

    def test_moves_right(self, paddle):
        """Test that holding right moves one step right."""
        paddle.update(left=False, right=True)
        assert paddle.x == 261

    def test_moves_left(self, paddle):
        """Test that holding left moves one step left."""
        paddle.update(left=True, right=False)
        assert paddle.x == 249

    def test_idle_without_input(self, paddle):
        """Test that the paddle stays put with nothing held."""
        paddle.update(left=False, right=False)
        assert paddle.x == 255

    def test_right_wins_when_both_held(self, paddle):
        """Test that right wins when both directions are held."""
        paddle.update(left=True, right=True)
        assert paddle.x == 261

    def test_stops_at_right_edge(self, paddle):
        """Test that the paddle stops flush with the right edge."""
        for _ in range(100):
            paddle.update(left=False, right=True)
        assert paddle.x == 510

    def test_stops_at_left_edge(self, paddle):
        """Test that the paddle stops flush with the left edge."""
        for _ in range(100):
            paddle.update(left=True, right=False)
        assert paddle.x == 0

    def test_never_leaves_screen(self, paddle):
        """Test that the paddle stays on screen under mixed input."""
        for frame in range(500):
            paddle.update(left=frame % 7 < 3, right=frame % 11 < 5)
            assert 0 <= paddle.x <= 600 - 90
