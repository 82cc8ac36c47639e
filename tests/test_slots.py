import unittest

from timetablegen.model import FormatError
from timetablegen.slots import DAY_ORDER, parse_time_slot


class TestParseTimeSlot(unittest.TestCase):
    def test_monday_first_period(self) -> None:
        slot = parse_time_slot("월요일1교시", "X")
        self.assertEqual(slot.day, "월")
        self.assertEqual(slot.period, "1")
        self.assertEqual(slot.course_name, "X")

    def test_tuesday_third_period(self) -> None:
        slot = parse_time_slot("화요일3교시", "X")
        self.assertEqual((slot.day, slot.period), ("화", "3"))

    def test_all_weekdays(self) -> None:
        names = ["월요일", "화요일", "수요일", "목요일", "금요일", "토요일", "일요일"]
        days = [parse_time_slot(f"{n}2교시", "X").day for n in names]
        self.assertEqual(days, DAY_ORDER)

    def test_label_is_kept_verbatim(self) -> None:
        slot = parse_time_slot("금요일9교시", "자료구조 (1001-02)")
        self.assertEqual(slot.course_name, "자료구조 (1001-02)")
        self.assertEqual(slot.period_number, 9)
        self.assertEqual(slot.key, "금9")

    def test_surrounding_whitespace_is_ignored(self) -> None:
        slot = parse_time_slot("  수요일4교시 ", "X")
        self.assertEqual((slot.day, slot.period), ("수", "4"))

    def test_missing_marker(self) -> None:
        with self.assertRaises(FormatError):
            parse_time_slot("월요일1", "X")

    def test_missing_period_digit(self) -> None:
        # "월요일" -> prefix "월요", last char "일": not a weekday
        with self.assertRaises(FormatError):
            parse_time_slot("월요일교시", "X")

    def test_too_short_before_marker(self) -> None:
        with self.assertRaises(FormatError):
            parse_time_slot("1교시", "X")
        with self.assertRaises(FormatError):
            parse_time_slot("교시", "X")

    def test_unknown_weekday(self) -> None:
        with self.assertRaises(FormatError):
            parse_time_slot("월1교시", "X")

    def test_non_numeric_period(self) -> None:
        with self.assertRaises(FormatError) as ctx:
            parse_time_slot("월요일A교시", "X")
        self.assertEqual(ctx.exception.token, "월요일A교시")

    def test_full_width_digit_is_rejected(self) -> None:
        # "１" from a Korean IME would give a clash key different from "월1"
        with self.assertRaises(FormatError):
            parse_time_slot("월요일１교시", "X")

    def test_period_zero_is_rejected(self) -> None:
        with self.assertRaises(FormatError):
            parse_time_slot("월요일0교시", "X")

    def test_leading_marker_is_skipped(self) -> None:
        slot = parse_time_slot("교시월요일1교시", "X")
        self.assertEqual((slot.day, slot.period), ("월", "1"))

    def test_format_error_is_value_error(self) -> None:
        with self.assertRaises(ValueError):
            parse_time_slot("nonsense", "X")


if __name__ == "__main__":
    unittest.main()
