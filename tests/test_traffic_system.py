import unittest
from ecotraffic.domain.models import SignalState, CongestionLevel
from ecotraffic.systems.traffic_system import (
    TrafficSystem, congestion_for, efficiency_for, co2_for, fuel_for, round_half_up
)
from fakes import ScriptedRandom, make_intersection


class TestDerivedMetrics(unittest.TestCase):
    def test_congestion_thresholds(self):
        self.assertEqual(congestion_for(0), CongestionLevel.LOW)
        self.assertEqual(congestion_for(4), CongestionLevel.LOW)
        self.assertEqual(congestion_for(5), CongestionLevel.MEDIUM)
        self.assertEqual(congestion_for(8), CongestionLevel.MEDIUM)
        self.assertEqual(congestion_for(9), CongestionLevel.HIGH)

    def test_efficiency_is_clamped_and_rounded(self):
        self.assertEqual(efficiency_for(10, 0), 92)
        self.assertEqual(efficiency_for(25, 3), 71)
        self.assertEqual(efficiency_for(90, 15), 20)
        self.assertEqual(efficiency_for(0, 0), 100)
        # 100 - 52*0.8 - 12*3 = 22.4
        self.assertEqual(efficiency_for(52, 12), 22)

    def test_high_queue_scenario(self):
        intersection = make_intersection(queue=10, idle=100)
        TrafficSystem.recompute_derived(intersection)
        self.assertEqual(intersection.congestionLevel, CongestionLevel.HIGH)
        self.assertEqual(intersection.co2Emissions, 33.0)
        self.assertEqual(intersection.fuelConsumption, 13.9)

    def test_emission_formulas(self):
        self.assertEqual(co2_for(188, 8), 39.4)
        self.assertEqual(fuel_for(39.4), 16.5)
        self.assertEqual(co2_for(0, 0), 0.0)
        self.assertEqual(fuel_for(0.0), 0.0)

    def test_round_half_up(self):
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(10.5), 11)
        self.assertEqual(round_half_up(34.25), 34)
        self.assertEqual(round_half_up(12.25, 1), 12.3)
        self.assertEqual(round_half_up(13.86, 1), 13.9)


class TestTrafficSystem(unittest.TestCase):
    def test_red_accumulates_queue_and_idling(self):
        rng = ScriptedRandom([2, 1, 2])
        intersection = make_intersection(vehicles=20, wait=30, queue=5, idle=60)
        TrafficSystem(rng).update(intersection, SignalState.RED)

        self.assertEqual(intersection.vehicleCount, 22)
        self.assertEqual(intersection.queueLength, 6)
        self.assertEqual(intersection.avgWaitTime, 32)
        # Every queued vehicle idles one second
        self.assertEqual(intersection.idleTime, 66)
        self.assertEqual(rng.calls, [(0, 2), (0, 1), (0, 2)])

    def test_green_discharges(self):
        rng = ScriptedRandom([4, 2, 1])
        intersection = make_intersection(vehicles=20, wait=30, queue=5, idle=60, status=SignalState.RED)
        TrafficSystem(rng).update(intersection, SignalState.GREEN)

        self.assertEqual(intersection.vehicleCount, 16)
        self.assertEqual(intersection.queueLength, 3)
        self.assertEqual(intersection.avgWaitTime, 29)
        self.assertEqual(intersection.idleTime, 55)
        self.assertEqual(intersection.lightStatus, SignalState.GREEN)
        self.assertEqual(rng.calls, [(2, 5), (1, 3), (1, 2)])

    def test_green_respects_floors(self):
        rng = ScriptedRandom(exhausted="high")
        intersection = make_intersection(vehicles=3, wait=11, queue=1, idle=2)
        TrafficSystem(rng).update(intersection, SignalState.GREEN)

        self.assertEqual(intersection.vehicleCount, 0)
        self.assertEqual(intersection.queueLength, 0)
        self.assertEqual(intersection.avgWaitTime, 10)
        self.assertEqual(intersection.idleTime, 0)

    def test_yellow_leaves_counts_unchanged(self):
        rng = ScriptedRandom()
        intersection = make_intersection(vehicles=20, wait=30, queue=10, idle=100)
        TrafficSystem(rng).update(intersection, SignalState.YELLOW)

        self.assertEqual(rng.calls, [])
        self.assertEqual(
            (intersection.vehicleCount, intersection.avgWaitTime, intersection.queueLength, intersection.idleTime),
            (20, 30, 10, 100),
        )
        self.assertEqual(intersection.lightStatus, SignalState.YELLOW)
        self.assertEqual(intersection.co2Emissions, 33.0)

    def test_unpaired_intersection_only_recomputes(self):
        intersection = make_intersection(queue=10, idle=100, status=SignalState.RED)
        TrafficSystem(ScriptedRandom()).update(intersection, None)
        self.assertEqual(intersection.lightStatus, SignalState.RED)
        self.assertEqual(intersection.queueLength, 10)
        self.assertEqual(intersection.congestionLevel, CongestionLevel.HIGH)

    def test_caps_hold_under_endless_red(self):
        system = TrafficSystem(ScriptedRandom(exhausted="high"))
        intersection = make_intersection()
        for _ in range(200):
            system.update(intersection, SignalState.RED)
            self.assertLessEqual(intersection.vehicleCount, 50)
            self.assertLessEqual(intersection.queueLength, 15)
            self.assertLessEqual(intersection.avgWaitTime, 90)

        self.assertEqual(intersection.vehicleCount, 50)
        self.assertEqual(intersection.queueLength, 15)
        self.assertEqual(intersection.avgWaitTime, 90)
        self.assertEqual(intersection.efficiency, 20)
        self.assertEqual(intersection.congestionLevel, CongestionLevel.HIGH)

    def test_floors_hold_under_endless_green(self):
        system = TrafficSystem(ScriptedRandom(exhausted="high"))
        intersection = make_intersection(vehicles=50, wait=90, queue=15, idle=500)
        for _ in range(200):
            system.update(intersection, SignalState.GREEN)
            self.assertGreaterEqual(intersection.vehicleCount, 0)
            self.assertGreaterEqual(intersection.queueLength, 0)
            self.assertGreaterEqual(intersection.avgWaitTime, 10)
            self.assertGreaterEqual(intersection.idleTime, 0)

        self.assertEqual(intersection.idleTime, 0)
        self.assertEqual(intersection.co2Emissions, 0.0)
        self.assertEqual(intersection.congestionLevel, CongestionLevel.LOW)


if __name__ == '__main__':
    unittest.main()
