# tline/tl_cli.py
import os
import sys
import math
import logging
import argparse
import numpy as np

from .tl_clock import ManualTickSource, SimulationClock, animate
from .tl_complex import Complex
from .tl_engine import evaluate
from .tl_errors import TransmissionLineError
from .tl_params import LOAD_PRESETS, LineParameters, apply_preset

def _fmt(value, spec='.4g'):
    if isinstance(value, float) and math.isinf(value):
        return 'inf'
    try:
        return format(value, spec)
    except (TypeError, ValueError):
        return repr(value)

def main(argv=None):
    ap = argparse.ArgumentParser(description="Transmission-line parameter engine")
    ap.add_argument('--R', type=float, default=0.0, help="ohm/m")
    ap.add_argument('--L', type=float, default=250e-9, help="H/m")
    ap.add_argument('--G', type=float, default=0.0, help="S/m")
    ap.add_argument('--C', type=float, default=100e-12, help="F/m")
    ap.add_argument('--f', type=float, default=1e9, help="Hz")
    ap.add_argument('--l', type=float, default=0.1, help="m")
    ap.add_argument('--Z0', type=float, default=50.0)
    ap.add_argument('--ZLre', type=float, default=75.0)
    ap.add_argument('--ZLim', type=float, default=25.0)
    ap.add_argument('--V0', type=float, default=1.0)
    ap.add_argument('--t', type=float, default=0.0, help="simulation time (s)")
    ap.add_argument('--speed', type=float, default=1.0, help="animation speed multiplier")
    ap.add_argument('--ticks', type=int, default=0, help="run the animation clock this many ticks from t=0 (overrides --t)")
    ap.add_argument('--samples', type=int, default=201)
    ap.add_argument('--preset', choices=sorted(LOAD_PRESETS), default=None)
    ap.add_argument('--plots_dir', default=None)
    ap.add_argument('-v', '--verbose', action='store_true')
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(asctime)s - %(levelname)s - %(name)s - %(message)s')

    try:
        p = LineParameters(args.R, args.L, args.G, args.C, args.f, args.l, args.Z0,
                           Complex(args.ZLre, args.ZLim), source_voltage=args.V0,
                           speed_multiplier=args.speed)
        if args.preset:
            p = apply_preset(p, args.preset)
        sol = evaluate(p, args.t, samples=args.samples)
        if args.ticks > 0:
            clock = SimulationClock.for_frequency(p.frequency_hz)
            for sol in animate(p, clock, ManualTickSource(args.ticks), samples=args.samples):
                pass
    except TransmissionLineError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    d, r = sol.derived, sol.reflection
    print(f'Zc={_fmt(d.Zc, ".3f")} ohm, gamma={_fmt(d.gamma, ".4e")} /m')
    print(f'lambda={_fmt(d.wavelength)} m, vp={_fmt(d.phase_velocity)} m/s, '
          f'electrical length={d.electrical_length_deg:.2f} deg, attenuation={d.attenuation_db:.3f} dB')
    print(f'Gamma_L={_fmt(r.gamma_load)}, Gamma_in={_fmt(r.gamma_input)}, |Gamma|={abs(r.gamma_input):.4f}')
    print(f'Q_series={_fmt(d.q_series, ".3f")}, Q_shunt={_fmt(d.q_shunt, ".3f")}')
    print(f't={sol.waveform.t:.4g} s')
    print(f'VSWR={_fmt(r.vswr, ".3f")}, RL={_fmt(r.return_loss_db, ".2f")} dB, Zin={_fmt(r.zin, ".3f")} ohm')

    if args.plots_dir:
        from .tl_plots import plot_waveform, plot_smith, plot_vswr_vs_freq
        os.makedirs(args.plots_dir, exist_ok=True)
        plot_waveform(sol, f'{args.plots_dir}/envelopes.png')
        plot_smith(sol, f'{args.plots_dir}/smith.png')
        freqs = np.linspace(args.f*0.5, args.f*1.5, 200)
        plot_vswr_vs_freq(p, freqs, f'{args.plots_dir}/vswr_vs_f.png')
    return 0

if __name__ == '__main__':
    sys.exit(main())
