import unittest
from ecotraffic.kernel.simulation_kernel import SimulationKernel

class TestDeterminism(unittest.TestCase):
    def test_determinism(self):
        # Run 1
        kernel1 = SimulationKernel()
        kernel1.initialize(seed=42)
        for _ in range(50):
            kernel1.run_tick()

        state1 = kernel1.get_snapshot()

        # Run 2
        kernel2 = SimulationKernel()
        kernel2.initialize(seed=42)
        for _ in range(50):
            kernel2.run_tick()

        state2 = kernel2.get_snapshot()

        # Verify intersections are identical
        self.assertEqual(len(state1.intersections), len(state2.intersections))
        for i1, i2 in zip(state1.intersections, state2.intersections):
            self.assertEqual(i1.intersection, i2.intersection)
            self.assertEqual(i1.vehicleCount, i2.vehicleCount)
            self.assertEqual(i1.queueLength, i2.queueLength)
            self.assertEqual(i1.idleTime, i2.idleTime)
            self.assertEqual(i1.co2Emissions, i2.co2Emissions)

        # Verify signals are identical
        for l1, l2 in zip(state1.lights, state2.lights):
            self.assertEqual(l1.id, l2.id)
            self.assertEqual(l1.status, l2.status)
            self.assertEqual(l1.timeRemaining, l2.timeRemaining)

        self.assertEqual(state1.stats, state2.stats)
        self.assertEqual(state1.environment, state2.environment)

    def test_reinitialize_replays(self):
        kernel = SimulationKernel()
        kernel.initialize(seed=5)
        for _ in range(30):
            kernel.run_tick()
        first = kernel.get_snapshot()

        kernel.initialize(seed=5)
        for _ in range(30):
            kernel.run_tick()

        self.assertEqual(kernel.get_snapshot(), first)

    def test_different_seeds(self):
        kernel1 = SimulationKernel()
        kernel1.initialize(seed=42)

        kernel2 = SimulationKernel()
        kernel2.initialize(seed=999)

        # Run enough ticks to likely diverge
        for _ in range(200):
            kernel1.run_tick()
            kernel2.run_tick()

        state1 = kernel1.get_snapshot()
        state2 = kernel2.get_snapshot()

        diverged = state1.stats.vehiclesProcessed != state2.stats.vehiclesProcessed
        for i1, i2 in zip(state1.intersections, state2.intersections):
            if (i1.vehicleCount, i1.queueLength, i1.avgWaitTime) != (i2.vehicleCount, i2.queueLength, i2.avgWaitTime):
                diverged = True

        self.assertTrue(diverged, "Different seeds should produce different states")

if __name__ == '__main__':
    unittest.main()
