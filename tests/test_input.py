"""Regression tests for raw-key decoding.

Covers ESC timing, arrow sequences, control tokens, UTF-8 symbols, and SGR
mouse press/drag/release decoding in raw terminal mode.
"""

import os
import threading
import time
import unittest

from lettergrid import input as input_mod


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
        started = time.monotonic()
        keys = self._read_all(b"\x1b", 1)
        elapsed = time.monotonic() - started

        self.assertEqual(keys, ["ESC"])
        self.assertLess(elapsed, 0.2)

    def test_arrow_sequences_are_recognized(self) -> None:
        keys = self._read_all(b"\x1b[A\x1b[B\x1b[C\x1b[D", 4)
        self.assertEqual(keys, ["UP", "DOWN", "RIGHT", "LEFT"])

    def test_double_escape_yields_two_escapes(self) -> None:
        self.assertEqual(self._read_all(b"\x1b\x1b", 2), ["ESC", "ESC"])

    def test_alt_chord_is_unknown_not_escape(self) -> None:
        self.assertEqual(self._read_all(b"\x1bax", 2), [input_mod.UNKNOWN_KEY, "x"])
        self.assertEqual(self._read_all("\x1bЖx".encode("utf-8"), 2), [input_mod.UNKNOWN_KEY, "x"])

    def test_unrecognized_csi_is_consumed_whole(self) -> None:
        # Delete, Ctrl+Up, F5: none may leave "~" or ";5A" behind as keys.
        keys = self._read_all(b"\x1b[3~\x1b[1;5A\x1b[15~z", 4)
        self.assertEqual(keys, [input_mod.UNKNOWN_KEY] * 3 + ["z"])

    def test_ss3_arrows_and_function_keys(self) -> None:
        keys = self._read_all(b"\x1bOA\x1bOP", 2)
        self.assertEqual(keys, ["UP", input_mod.UNKNOWN_KEY])

    def test_truncated_csi_is_unknown(self) -> None:
        self.assertEqual(self._read_all(b"\x1b[", 1), [input_mod.UNKNOWN_KEY])

    def test_control_tokens(self) -> None:
        keys = self._read_all(b" \x7f\x08\r\n\x03\x11", 7)
        self.assertEqual(
            keys,
            ["SPACE", "BACKSPACE", "BACKSPACE", "ENTER_CR", "ENTER_LF", "CTRL_C", "CTRL_Q"],
        )

    def test_multibyte_symbol_is_read_whole(self) -> None:
        self.assertEqual(self._read_all("Жx".encode("utf-8"), 2), ["Ж", "x"])

    def test_timeout_returns_empty_token(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            self.assertEqual(input_mod.read_key(read_fd, timeout_ms=5), "")
        finally:
            os.close(read_fd)
            os.close(write_fd)


class SgrMouseDecodingTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def _read(self, payload: bytes) -> str:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, payload)
            return input_mod.read_key(read_fd, timeout_ms=20)
        finally:
            os.close(read_fd)
            os.close(write_fd)

    def test_left_press_drag_release(self) -> None:
        self.assertEqual(self._read(b"\x1b[<0;12;5M"), "MOUSE_LEFT_DOWN:12:5")
        self.assertEqual(self._read(b"\x1b[<32;13;6M"), "MOUSE_LEFT_DRAG:13:6")
        self.assertEqual(self._read(b"\x1b[<0;13;6m"), "MOUSE_LEFT_UP:13:6")

    def test_wheel_and_other_buttons_are_generic_mouse_tokens(self) -> None:
        self.assertEqual(self._read(b"\x1b[<64;1;1M"), "MOUSE")
        self.assertEqual(self._read(b"\x1b[<2;4;4M"), "MOUSE")

    def test_malformed_payload_is_unknown(self) -> None:
        self.assertEqual(self._read(b"\x1b[<0;x;5M"), input_mod.UNKNOWN_KEY)
        self.assertEqual(self._read(b"\x1b[<0;1M"), input_mod.UNKNOWN_KEY)

    def test_overlong_report_is_drained(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, b"\x1b[<" + b"1" * 100 + b";1;1Mq")
            first = input_mod.read_key(read_fd, timeout_ms=20)
            second = input_mod.read_key(read_fd, timeout_ms=20)
        finally:
            os.close(read_fd)
            os.close(write_fd)
        self.assertEqual((first, second), (input_mod.UNKNOWN_KEY, "q"))

    def test_report_split_across_slow_writes(self) -> None:
        read_fd, write_fd = os.pipe()
        timer = threading.Timer(0.06, os.write, args=(write_fd, b"5M"))
        try:
            os.write(write_fd, b"\x1b[<0;12;")
            timer.start()
            key = input_mod.read_key(read_fd, timeout_ms=20)
        finally:
            timer.join()
            os.close(read_fd)
            os.close(write_fd)
        self.assertEqual(key, "MOUSE_LEFT_DOWN:12:5")


class PointerTokenParsingTests(unittest.TestCase):
    def test_parse_mouse_col_row(self) -> None:
        self.assertEqual(input_mod.parse_mouse_col_row("MOUSE_LEFT_DOWN:3:9"), (3, 9))
        self.assertEqual(input_mod.parse_mouse_col_row("MOUSE"), (None, None))
        self.assertEqual(input_mod.parse_mouse_col_row("MOUSE_LEFT_DOWN:a:9"), (None, None))

    def test_parse_pointer_event_phases(self) -> None:
        from lettergrid.hit_test import PointerPhase

        self.assertIs(input_mod.parse_pointer_event("MOUSE_LEFT_DOWN:1:2").phase, PointerPhase.PRESS)
        self.assertIs(input_mod.parse_pointer_event("MOUSE_LEFT_DRAG:1:2").phase, PointerPhase.MOVE)
        event = input_mod.parse_pointer_event("MOUSE_LEFT_UP:7:4")
        self.assertIs(event.phase, PointerPhase.RELEASE)
        self.assertEqual((event.x, event.y), (7, 4))
        self.assertIsNone(input_mod.parse_pointer_event("MOUSE"))


if __name__ == "__main__":
    unittest.main()
