"""Quick test without Unicode characters to verify basic functionality"""

import sys

import numpy as np

print("Testing import...")
from Qubit.qubit_state import QubitState, create_state
from Renderers.scene_layout import BlochSceneLayout
print("OK - Imports successful\n")

print("=" * 70)
print("TEST 1: Equator State")
print("=" * 70)

state = QubitState(np.pi / 2, 0.0)
vector = state.get_vector()
print(f"  vector = {vector}")
print(f"  P(0) = {state.get_probability0():.6f}, P(1) = {state.get_probability1():.6f}")

test1_pass = (np.allclose(vector, [0, 0, -1], atol=1e-9) and
              np.isclose(state.get_probability0(), 0.5, atol=1e-9))
print(f"  PASSED: {test1_pass}\n")

print("=" * 70)
print("TEST 2: Azimuth Wrap-Around")
print("=" * 70)

state.set_from_angles(1.0, -np.pi / 2)
print(f"  phi=-pi/2 -> {state.get_azimuth():.6f} (expected {3 * np.pi / 2:.6f})")
test2_pass = np.isclose(state.get_azimuth(), 3 * np.pi / 2, atol=1e-9)
print(f"  PASSED: {test2_pass}\n")

print("=" * 70)
print("TEST 3: Vector Round Trip")
print("=" * 70)

source = QubitState(2.0, 4.0)
target = QubitState()
target.set_from_vector(*source.get_vector())
print(f"  source: theta={source.inclination:.6f}, phi={source.azimuth:.6f}")
print(f"  target: theta={target.inclination:.6f}, phi={target.azimuth:.6f}")
test3_pass = np.allclose(source.get_angles(), target.get_angles(), atol=1e-9)
print(f"  PASSED: {test3_pass}\n")

print("=" * 70)
print("TEST 4: Drag to |+i>")
print("=" * 70)

state = create_state('|0>')
layout = BlochSceneLayout(state)
layout.drag_to((3.0, 0.0, 0.0), (-1.0, 0.0, 0.0))
print(f"  After drag: theta={state.inclination:.4f}, phi={state.azimuth:.4f}")
test4_pass = np.allclose(state.get_angles(), (np.pi / 2, np.pi / 2), atol=1e-9)
print(f"  PASSED: {test4_pass}\n")

print("=" * 70)
print("SUMMARY")
print("=" * 70)

tests = [
    ("Equator State", test1_pass),
    ("Azimuth Wrap-Around", test2_pass),
    ("Vector Round Trip", test3_pass),
    ("Drag to |+i>", test4_pass),
]

for name, passed in tests:
    status = "PASS" if passed else "FAIL"
    print(f"  {name:30s} {status}")

passed_count = sum(1 for _, p in tests if p)
print(f"\n  Total: {passed_count}/{len(tests)} tests passed")

all_pass = passed_count == len(tests)
if all_pass:
    print("\n  ALL TESTS PASSED!")
else:
    print(f"\n  {len(tests) - passed_count} test(s) failed")

sys.exit(0 if all_pass else 1)
