from __future__ import annotations

import unittest

from zombiesplit.errors import FieldParseError, FieldTooBigError, TimeError, TimeOverflowError
from zombiesplit.position import Position
from zombiesplit.timing import Field, HourOverflow, Time


class PositionTest(unittest.TestCase):
    def test_maxima(self) -> None:
        self.assertEqual(Position.HOURS.max, 255)
        self.assertEqual(Position.MINUTES.max, 59)
        self.assertEqual(Position.SECONDS.max, 59)
        self.assertEqual(Position.MILLISECONDS.max, 999)
        self.assertEqual(Position.HOURS.cap, 256)

    def test_delimiters_and_offsets(self) -> None:
        self.assertEqual([p.delimiter for p in Position], ["h", "m", "s", None])
        self.assertEqual(Position.MINUTES.ms_offset, 60_000)
        self.assertEqual(Position.MILLISECONDS.ms_offset, 1)

    def test_from_delimiter(self) -> None:
        self.assertIs(Position.from_delimiter("m"), Position.MINUTES)
        self.assertIs(Position.from_delimiter("."), Position.MILLISECONDS)
        with self.assertRaises(ValueError):
            Position.from_delimiter("x")

    def test_label(self) -> None:
        self.assertEqual(str(Position.SECONDS), "seconds")


class FieldTest(unittest.TestCase):
    def test_new_with_carry(self) -> None:
        result = Field.new_with_carry(Position.SECONDS, 64)
        self.assertEqual(result.value, Field(Position.SECONDS, 4))
        self.assertEqual(result.carry, 1)
        self.assertEqual(result.original, 64)

    def test_try_from_fits(self) -> None:
        self.assertEqual(int(Field.try_from(Position.SECONDS, 4)), 4)

    def test_try_from_overflow(self) -> None:
        with self.assertRaises(FieldTooBigError) as ctx:
            Field.try_from(Position.SECONDS, 64)
        self.assertEqual(ctx.exception.value, 64)
        self.assertEqual(ctx.exception.maximum, 59)
        self.assertIs(ctx.exception.position, Position.SECONDS)

    def test_direct_construction_is_bounded(self) -> None:
        with self.assertRaises(FieldTooBigError):
            Field(Position.MINUTES, 60)
        with self.assertRaises(ValueError):
            Field(Position.MINUTES, -1)

    def test_parse_empty_is_zero(self) -> None:
        self.assertEqual(Field.parse(Position.MINUTES, ""), Field.zero(Position.MINUTES))

    def test_parse_bounds_for_every_position(self) -> None:
        for position in Position:
            self.assertEqual(Field.parse(position, str(position.max)).value, position.max)
            with self.assertRaises(FieldTooBigError):
                Field.parse(position, str(position.max + 1))

    def test_parse_rejects_non_digits(self) -> None:
        for text in ["5x", "+5", "-5", " 5", "1.5"]:
            with self.assertRaises(FieldParseError):
                Field.parse(Position.SECONDS, text)

    def test_errors_are_value_errors(self) -> None:
        with self.assertRaises(ValueError):
            Field.parse(Position.SECONDS, "nope")
        self.assertTrue(issubclass(FieldTooBigError, TimeError))

    def test_parse_delimited_consumes_component(self) -> None:
        field, rest = Field.parse_delimited(Position.MINUTES, "2m3s")
        self.assertEqual(field, Field(Position.MINUTES, 2))
        self.assertEqual(rest, "3s")

    def test_parse_delimited_missing_delimiter(self) -> None:
        field, rest = Field.parse_delimited(Position.HOURS, "3s456")
        self.assertEqual(field.value, 0)
        self.assertEqual(rest, "3s456")

    def test_as_msecs(self) -> None:
        self.assertEqual(Field(Position.SECONDS, 20).as_msecs(), 20_000)

    def test_delimited(self) -> None:
        self.assertEqual(Field(Position.MINUTES, 0).delimited(), "")
        self.assertEqual(Field(Position.MINUTES, 5).delimited(), "5m")


class TimeParseTest(unittest.TestCase):
    def test_empty(self) -> None:
        self.assertEqual(Time.parse(""), Time())

    def test_millis_only(self) -> None:
        # No delimiters at all means the number is milliseconds.
        self.assertEqual(Time.parse("123"), Time.of(millis=123))

    def test_secs_only(self) -> None:
        self.assertEqual(Time.parse("10s"), Time.of(secs=10))

    def test_secs_millis(self) -> None:
        self.assertEqual(Time.parse("10s500"), Time.of(secs=10, millis=500))

    def test_all(self) -> None:
        t = Time.from_str("1h2m3s456")
        self.assertEqual(int(t.hours), 1)
        self.assertEqual(int(t.mins), 2)
        self.assertEqual(int(t.secs), 3)
        self.assertEqual(int(t.millis), 456)

    def test_strips_whitespace(self) -> None:
        self.assertEqual(Time.parse("  10s "), Time.of(secs=10))

    def test_field_too_big(self) -> None:
        with self.assertRaises(FieldTooBigError) as ctx:
            Time.parse("61s")
        self.assertIs(ctx.exception.position, Position.SECONDS)
        with self.assertRaises(FieldTooBigError):
            Time.parse("1s1000")

    def test_field_parse_error(self) -> None:
        with self.assertRaises(FieldParseError) as ctx:
            Time.parse("1h2x3s")
        self.assertIs(ctx.exception.position, Position.SECONDS)


class TimeFormatTest(unittest.TestCase):
    def test_zero_keeps_seconds(self) -> None:
        self.assertEqual(str(Time()), "0s")

    def test_formats(self) -> None:
        self.assertEqual(str(Time.of(secs=10, millis=500)), "10s500")
        self.assertEqual(str(Time.of(1, 2, 3, 456)), "1h2m3s456")
        self.assertEqual(str(Time.of(hours=1, secs=5)), "1h5s")

    def test_milliseconds_are_three_digits(self) -> None:
        self.assertEqual(str(Time.of(secs=1, millis=5)), "1s005")
        self.assertEqual(str(Time.of(mins=2, millis=40)), "2m0s040")
        self.assertEqual(Time.parse("1s005"), Time.parse("1s5"))

    def test_padded_field(self) -> None:
        self.assertEqual(Field(Position.MILLISECONDS, 5).padded(), "005")
        self.assertEqual(Field(Position.SECONDS, 7).padded(), "07")
        self.assertEqual(Field(Position.HOURS, 3).padded(), "3")

    def test_zero_leading_fields_disappear(self) -> None:
        self.assertEqual(str(Time.parse("0h1m2s")), "1m2s")

    def test_value_round_trip(self) -> None:
        for text in ["", "123", "10s", "10s500", "1h2m3s456", "0h0m5s", "1h0m0s1", "255h59m59s999"]:
            parsed = Time.parse(text)
            self.assertEqual(Time.parse(str(parsed)), parsed, text)


class TimeArithmeticTest(unittest.TestCase):
    def test_seconds_carry_into_minutes(self) -> None:
        self.assertEqual(Time.of(secs=59) + Time.of(secs=2), Time.of(mins=1, secs=1))

    def test_millis_carry_all_the_way(self) -> None:
        total = Time.of(mins=59, secs=59, millis=999) + Time.of(millis=1)
        self.assertEqual(total, Time.of(hours=1))

    def test_add_leaves_operands_alone(self) -> None:
        left = Time.of(secs=30)
        right = Time.of(secs=45)
        left + right
        self.assertEqual(left, Time.of(secs=30))
        self.assertEqual(right, Time.of(secs=45))

    def test_hour_overflow_wraps_by_default(self) -> None:
        self.assertEqual(Time.maximum() + Time.of(millis=1), Time())
        self.assertEqual(Time.of(hours=200) + Time.of(hours=100), Time.of(hours=44))

    def test_hour_overflow_saturates(self) -> None:
        total = Time.of(hours=200).add(Time.of(hours=100), overflow=HourOverflow.SATURATE)
        self.assertEqual(total, Time.maximum())

    def test_hour_overflow_errors(self) -> None:
        with self.assertRaises(TimeOverflowError) as ctx:
            Time.of(hours=200).add(Time.of(hours=100), overflow=HourOverflow.ERROR)
        self.assertEqual(ctx.exception.hours, 300)

    def test_from_msecs(self) -> None:
        self.assertEqual(Time.from_msecs(3_723_456), Time.of(1, 2, 3, 456))
        self.assertEqual(Time.of(1, 2, 3, 456).as_msecs(), 3_723_456)

    def test_total(self) -> None:
        self.assertEqual(Time.total([]), Time())
        times = [Time.of(secs=30), Time.of(secs=45), Time.of(millis=250)]
        self.assertEqual(Time.total(times), Time.of(mins=1, secs=15, millis=250))

    def test_ordering_follows_duration(self) -> None:
        self.assertGreater(Time.of(mins=1), Time.of(secs=59, millis=999))
        self.assertLess(Time.of(millis=1), Time.of(secs=1))

    def test_is_zero(self) -> None:
        self.assertTrue(Time().is_zero())
        self.assertFalse(Time.of(millis=1).is_zero())


class TimeMutationTest(unittest.TestCase):
    def test_field_at_and_with_field(self) -> None:
        t = Time.of(1, 2, 3, 456)
        self.assertEqual(t.field_at(Position.MINUTES), Field(Position.MINUTES, 2))
        self.assertEqual(t.field_at(Position.MILLISECONDS).value, 456)
        self.assertEqual(t.with_field(Field(Position.SECONDS, 9)), Time.of(1, 2, 9, 456))

    def test_set_field_str(self) -> None:
        t = Time.of(secs=5)
        t.set_field_str(Position.MINUTES, "42")
        self.assertEqual(t, Time.of(mins=42, secs=5))

    def test_set_field_str_empty_clears(self) -> None:
        t = Time.of(secs=5)
        t.set_field_str(Position.SECONDS, "")
        self.assertTrue(t.is_zero())

    def test_set_field_str_failure_keeps_value(self) -> None:
        t = Time.of(mins=3)
        with self.assertRaises(FieldTooBigError):
            t.set_field_str(Position.MINUTES, "75")
        self.assertEqual(t, Time.of(mins=3))

    def test_with_field(self) -> None:
        t = Time.of(secs=5)
        updated = t.with_field(Field(Position.HOURS, 2))
        self.assertEqual(updated, Time.of(hours=2, secs=5))
        self.assertEqual(t, Time.of(secs=5))


if __name__ == "__main__":
    unittest.main()
