"""
Tests for AnimationPlayer timing and frame cycling.
"""

import unittest

from icon_studio.logic.animation import AnimationPlayer, DEFAULT_INTERVAL_MS
from icon_studio.logic.document import Document


class TestAnimationPlayer(unittest.TestCase):

    def setUp(self):
        self.doc = Document(8, 8)
        self.doc.add_frame()
        self.doc.add_frame()
        self.doc.select_frame(0)
        self.player = AnimationPlayer(self.doc)

    def test_single_frame_does_not_play(self):
        player = AnimationPlayer(Document(4, 4))
        self.assertFalse(player.play())
        self.assertFalse(player.is_playing)

    def test_first_tick_only_records_time(self):
        self.player.play()
        self.assertFalse(self.player.tick(1000))
        self.assertEqual(self.player.frame_index, 0)

    def test_play_with_start_time(self):
        self.player.play(now=1000)
        self.assertFalse(self.player.tick(1250))
        self.assertTrue(self.player.tick(1251))

    def test_advances_strictly_after_interval(self):
        self.player.play()
        self.player.tick(1000)
        self.assertFalse(self.player.tick(1250))
        self.assertTrue(self.player.tick(1251))
        self.assertEqual(self.player.frame_index, 1)
        self.assertIs(self.player.displayed_frame, self.doc.frames[1])

    def test_interval_measured_from_last_advance(self):
        self.player.play()
        self.player.tick(0)
        self.player.tick(300)
        self.assertFalse(self.player.tick(500))
        self.assertTrue(self.player.tick(551))
        self.assertEqual(self.player.frame_index, 2)

    def test_wraps_to_first_frame(self):
        self.player.play()
        for t in (0, 251, 502, 753):
            self.player.tick(t)
        self.assertEqual(self.player.frame_index, 0)

    def test_starts_from_current_frame(self):
        self.doc.select_frame(2)
        self.player.play()
        self.player.tick(0)
        self.player.tick(251)
        self.assertEqual(self.player.frame_index, 0)

    def test_stop_shows_edited_frame(self):
        self.player.play()
        self.player.tick(0)
        self.player.tick(251)
        self.assertTrue(self.player.stop())
        self.assertFalse(self.player.is_playing)
        self.assertIs(self.player.displayed_frame, self.doc.frames[0])
        self.assertFalse(self.player.tick(10000))

    def test_toggle(self):
        self.assertTrue(self.player.toggle())
        self.assertFalse(self.player.toggle())

    def test_invalid_interval_falls_back(self):
        for bad in (0, -10, "fast", None):
            self.player.set_interval(bad)
            self.assertEqual(self.player.interval_ms, DEFAULT_INTERVAL_MS)
        self.player.set_interval("100")
        self.assertEqual(self.player.interval_ms, 100)

    def test_set_interval_restarts_timing(self):
        self.player.play()
        self.player.tick(0)
        self.player.set_interval(50)
        self.assertTrue(self.player.is_playing)
        self.assertFalse(self.player.tick(40))
        self.assertFalse(self.player.tick(90))
        self.assertTrue(self.player.tick(91))

    def test_survives_frames_removed_while_playing(self):
        self.player.play()
        self.player.tick(0)
        self.player.tick(251)
        self.player.tick(502)
        self.doc.remove_frame(2)
        self.assertIn(self.player.displayed_frame, self.doc.frames)
        self.player.tick(753)
        self.assertEqual(self.player.frame_index, 1)


if __name__ == '__main__':
    unittest.main()
