"""Regression tests for raw-key decoding.

Covers ESC timing, arrow and paging sequences, control-key token mapping,
UTF-8 characters, and SGR mouse reports.
"""

import os
import time
import unittest

from lazydict import input as input_mod


class ReadKeyRegressionTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def _read_all(self, payload: bytes, count: int) -> list[str]:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, payload)
            return [input_mod.read_key(read_fd, timeout_ms=20) for _ in range(count)]
        finally:
            os.close(read_fd)
            os.close(write_fd)

    def test_single_escape_returns_esc_without_second_keypress(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, b"\x1b")
            started = time.monotonic()
            key = input_mod.read_key(read_fd, timeout_ms=20)
            elapsed = time.monotonic() - started
        finally:
            os.close(read_fd)
            os.close(write_fd)

        self.assertEqual(key, "ESC")
        # Esc waits briefly for sequence bytes, but should not require another key press.
        self.assertLess(elapsed, 0.2)

    def test_timeout_without_input_returns_empty_token(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            key = input_mod.read_key(read_fd, timeout_ms=10)
        finally:
            os.close(read_fd)
            os.close(write_fd)

        self.assertEqual(key, "")

    def test_arrow_sequences_are_recognized(self) -> None:
        keys = self._read_all(b"\x1b[A\x1b[B\x1b[C\x1b[D", 4)
        self.assertEqual(keys, ["UP", "DOWN", "RIGHT", "LEFT"])

    def test_page_keys_are_recognized(self) -> None:
        keys = self._read_all(b"\x1b[5~\x1b[6~", 2)
        self.assertEqual(keys, ["PAGE_UP", "PAGE_DOWN"])

    def test_escape_does_not_swallow_following_printable_key(self) -> None:
        keys = self._read_all(b"\x1ba", 2)
        self.assertEqual(keys, ["ESC", "a"])

    def test_control_keys_are_recognized(self) -> None:
        keys = self._read_all(b"\x03\x19\x7f\r\n", 5)
        self.assertEqual(keys, ["CTRL_C", "CTRL_Y", "BACKSPACE", "ENTER_CR", "ENTER_LF"])

    def test_multibyte_utf8_character_is_read_whole(self) -> None:
        keys = self._read_all("é字".encode("utf-8"), 2)
        self.assertEqual(keys, ["é", "字"])

    def test_sgr_left_press_and_release(self) -> None:
        keys = self._read_all(b"\x1b[<0;15;7M\x1b[<0;15;7m", 2)
        self.assertEqual(keys, ["MOUSE_LEFT_DOWN:15:7", "MOUSE_LEFT_UP:15:7"])

    def test_sgr_mouse_wheel_is_recognized(self) -> None:
        keys = self._read_all(b"\x1b[<64;10;4M\x1b[<65;11;5M", 2)
        self.assertEqual(keys, ["MOUSE_WHEEL_UP:10:4", "MOUSE_WHEEL_DOWN:11:5"])

    def test_sgr_right_click_is_generic_mouse_token(self) -> None:
        keys = self._read_all(b"\x1b[<2;3;4M", 1)
        self.assertEqual(keys, ["MOUSE"])


if __name__ == "__main__":
    unittest.main()
