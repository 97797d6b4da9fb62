import logging
import sys

from beamvibration import BeamVibrationAnalyzer, load_config


def print_report(analyzer):
    results = analyzer.get_results()
    props = analyzer.properties

    print(f"Beam type: {results.beam_type.value}")
    print(f"EI = {results.flexural_rigidity:.6e} N m^2, rho*A = {results.mass_per_length:.6g} kg/m\n")

    print("Natural frequencies:")
    for root, f in zip(results.roots, results.natural_frequencies):
        print(f"  mode {root.mode}: f = {f:.4f} Hz (bL = {root.bl:.4f})")
    if len(results.roots) < analyzer.nb_modes:
        print(f"  ({analyzer.nb_modes - len(results.roots)} mode(s) did not converge)")

    deflection = results.static_deflection
    if deflection is not None:
        print(f"\nStatic deflection under {deflection.load:.0f} N: "
              f"max {deflection.max_deflection:.6e} m at x = {deflection.max_deflection_location:.3f} m")

    if results.damping_coefficient is not None:
        print(f"\nDamping ratio {props.damping_ratio}: c = {results.damping_coefficient:.6g} N s/m^2")
    response = results.damped_response
    if response is not None:
        print(f"  fn = {response.natural_frequency:.4f} Hz, fd = {response.damped_frequency:.4f} Hz, "
              f"simulated over {response.time[-1]:.3f} s")

    if analyzer.modal_properties:
        print("\nModal properties:")
        for mp in analyzer.modal_properties:
            print(f"  mode {mp.mode}: k = {mp.modal_stiffness:.6e}, m = {mp.modal_mass:.6g}, "
                  f"mean = {mp.mean_displacement:.4f}, f_rayleigh = {mp.rayleigh_frequency:.4f} Hz")


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) != 1:
        print("usage: python -m beamvibration.utilities.run_analysis CONFIG.json", file=sys.stderr)
        return 2

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    analyzer = BeamVibrationAnalyzer(load_config(argv[0]))
    analyzer.run_analysis()
    print_report(analyzer)
    return 0


if __name__ == "__main__":
    sys.exit(main())
