import unittest

from libweather.domain import (
    MISSING_FLOAT,
    MISSING_INT,
    Forecast,
    ForecastDay,
    WeatherCondition,
    describe_weather,
    is_missing,
)


class TestDescribeWeather(unittest.TestCase):
    def test_plain_skies(self):
        self.assertEqual(describe_weather(WeatherCondition.CLEAR), "Clear")
        self.assertEqual(describe_weather(4), "Overcast")

    def test_combined_conditions(self):
        self.assertEqual(describe_weather(5), "Scattered clouds with light rain")
        self.assertEqual(describe_weather(9), "Cloudy with moderate rain")
        self.assertEqual(describe_weather(13), "Overcast with thunderstorms")
        self.assertEqual(describe_weather(14), "Scattered clouds with thunderstorms and hailstorms")
        self.assertEqual(describe_weather(18), "Cloudy with snow")
        self.assertEqual(describe_weather(WeatherCondition.OVERCAST_SLEET), "Overcast with sleet")

    def test_unknown_codes(self):
        for code in (0, 23, -1, MISSING_INT):
            self.assertEqual(describe_weather(code), "Unknown")


class TestModel(unittest.TestCase):
    def test_new_day_fields_start_missing(self):
        day = ForecastDay(date=None)
        self.assertEqual(day.temp_min, MISSING_INT)
        self.assertEqual(day.rain, MISSING_FLOAT)
        self.assertEqual(day.hours, [])
        self.assertEqual(day.description, "Unknown")

    def test_is_missing(self):
        self.assertTrue(is_missing(MISSING_INT))
        self.assertTrue(is_missing(MISSING_FLOAT))
        self.assertTrue(is_missing(None))
        self.assertFalse(is_missing(0))
        self.assertFalse(is_missing(0.0))
        self.assertFalse(is_missing("N"))

    def test_forecast_iterates_days(self):
        days = [ForecastDay(date=None), ForecastDay(date=None)]
        forecast = Forecast(days=days)
        self.assertEqual(len(forecast), 2)
        self.assertEqual(list(forecast), days)


if __name__ == "__main__":
    unittest.main()
