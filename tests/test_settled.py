import asyncio
import unittest

from app.settled import gather_settled


async def _value(v, delay=0.0):
    await asyncio.sleep(delay)
    return v


async def _boom(delay=0.0):
    await asyncio.sleep(delay)
    raise RuntimeError("boom")


class TestGatherSettled(unittest.IsolatedAsyncioTestCase):
    async def test_input_order_kept_and_failures_isolated(self):
        results = await gather_settled(_value("slow", 0.03), _boom(0.01), _value("fast"))

        self.assertEqual([r.ok for r in results], [True, False, True])
        self.assertEqual(results[0].value, "slow")
        self.assertEqual(results[2].value, "fast")
        self.assertIsInstance(results[1].error, RuntimeError)
        self.assertIsNone(results[1].value_or_none())

    async def test_none_is_a_successful_value(self):
        (result,) = await gather_settled(_value(None))
        self.assertTrue(result.ok)
        self.assertIsNone(result.value_or_none())

    async def test_empty_input(self):
        self.assertEqual(await gather_settled(), [])


if __name__ == "__main__":
    unittest.main()
