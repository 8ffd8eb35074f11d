"""
Radarplot Core - Quick Start Example

두 번의 radar 관측으로 CPA 계산 후 회피 동작 계산
"""
import logging

from radarplot_core import (
    ManeuverAxis,
    ManeuverRequest,
    ManeuverSolved,
    Observation,
    OwnShip,
    solve_plot,
)
from radarplot_core.utils import minutes_to_clock_string


def print_target(target):
    if not target.is_complete:
        return
    rel, true = target.relative_motion, target.true_motion
    print(f"Target {target.letter}: KBr={rel.kbr:05.1f}° vBr={rel.vbr:.1f}kn  "
          f"KB={true.kb:05.1f}° vB={true.vb:.1f}kn  aspect={true.aspect:.0f}°")

    if target.has_cpa:
        cpa = target.cpa
        print(f"  CPA {cpa.cpa:.2f} nm at {minutes_to_clock_string(cpa.cpa_clock)} "
              f"(TCPA {cpa.tcpa:.1f} min), PCPA {cpa.pcpa:05.1f}°")
    else:
        print("  CPA passed")

    if target.has_crossing:
        bc = target.bow_crossing
        print(f"  Bow crossing {bc.bcr:.2f} nm ahead at {minutes_to_clock_string(bc.bc_clock)}")


def main():
    logging.basicConfig(level=logging.INFO)

    print("=" * 60)
    print("Radarplot Core - Quick Start")
    print("=" * 60)

    # 1. Own Ship
    own_ship = OwnShip(course=0.0, speed=10.0)
    print(f"\nOwn Ship: course={own_ship.course:05.1f}°, speed={own_ship.speed:.1f}kn")

    # 2. 관측 (12:00, 12:06)
    observations = [
        (Observation(time=720.0, bearing=45.0, distance=10.0),
         Observation(time=726.0, bearing=45.0, distance=8.0)),
        (Observation(time=720.0, bearing=90.0, distance=6.0),
         Observation(time=726.0, bearing=90.0, distance=5.0)),
    ]

    # 3. Target B에 대해 5 nm에서 CPA 2 nm가 되도록 course 변경
    request = ManeuverRequest(
        target_index=0,
        axis=ManeuverAxis.COURSE,
        maneuver_distance=5.0,
        desired_cpa=2.0,
    )
    solution = solve_plot(observations, own_ship, request)

    print("\n[Targets]")
    for target in solution.targets:
        print_target(target)

    print("\n[Maneuver]")
    maneuver = solution.maneuver
    if isinstance(maneuver, ManeuverSolved):
        print(f"At {minutes_to_clock_string(maneuver.maneuver_clock)} "
              f"({maneuver.maneuver_distance:.1f} nm): new course {maneuver.required_course:05.1f}° "
              f"({maneuver.course_change:+.1f}°)")
        print(f"New CPA {maneuver.new_cpa:.2f} nm at {minutes_to_clock_string(maneuver.new_cpa_clock)}")
        if maneuver.is_degraded:
            print(f"⚠️  best-effort solution ({maneuver.degraded.value})")

        for effect in solution.secondary:
            if effect is None:
                continue
            letter = solution.targets[effect.target_index].letter
            if effect.new_cpa is None:
                print(f"Target {letter}: CPA passed after maneuver")
            else:
                print(f"Target {letter}: new CPA {effect.new_cpa.cpa:.2f} nm "
                      f"at {minutes_to_clock_string(effect.new_cpa.cpa_clock)}")
    else:
        print(f"No maneuver: {maneuver}")

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
