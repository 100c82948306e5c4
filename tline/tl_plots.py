# tline/tl_plots.py
import math
import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
from dataclasses import replace

from .tl_core import derive_line_state
from .tl_transform import transform_load

def plot_waveform(sol, savepath):
    w = sol.waveform
    fig, (ax_v, ax_i) = plt.subplots(2, 1, figsize=(8,6), sharex=True)
    ax_v.plot(w.z, w.total_v, label='V(z,t)', linewidth=2)
    ax_v.plot(w.z, w.forward_v, '--', label='forward')
    ax_v.plot(w.z, w.reflected_v, ':', label='reflected')
    ax_v.axhline(w.envelope, color='grey', linewidth=0.8)
    ax_v.axhline(-w.envelope, color='grey', linewidth=0.8)
    ax_v.set_ylabel('Voltage (V)')
    vswr = sol.reflection.vswr
    ax_v.set_title(f"t={w.t:.3g} s | VSWR={'inf' if math.isinf(vswr) else f'{vswr:.2f}'}")
    ax_v.legend(loc='upper right')
    ax_i.plot(w.z, w.total_i, label='I(z,t)', color='tab:red')
    ax_i.set_xlabel('z (m)')
    ax_i.set_ylabel('Current (A)')
    for ax in (ax_v, ax_i):
        ax.grid(True, linestyle="--", alpha=0.6)
    fig.tight_layout()
    fig.savefig(savepath, dpi=120)
    plt.close(fig)

def plot_smith(sol, savepath):
    g = sol.grid
    fig, ax = plt.subplots(figsize=(6,6))
    for c in [g.outer] + g.resistance:
        xy = c.points()
        ax.plot(xy[:,0], xy[:,1], color='#333', linewidth=0.8)
    for a in g.reactance:
        xy = a.points()
        ax.plot(xy[:,0], xy[:,1], color='#333', linewidth=0.8)
    for rl in g.radials:
        ax.plot([rl.x0, rl.x1], [rl.y0, rl.y1], color='#ddd', linewidth=0.5)
    ax.plot(sol.load_point.x, sol.load_point.y, 'o', label='Z_L')
    ax.plot(sol.input_point.x, sol.input_point.y, 's', label='Z_in')
    ax.set_aspect('equal')
    ax.invert_yaxis()  # plot coordinates grow downward
    ax.set_axis_off()
    ax.legend(loc='lower right')
    fig.tight_layout()
    fig.savefig(savepath, dpi=120)
    plt.close(fig)

def plot_vswr_vs_freq(params, f_array_hz, savepath):
    vs = []
    for f in f_array_hz:
        p = replace(params, frequency_hz=float(f))
        vswr = transform_load(p, derive_line_state(p)).vswr
        vs.append(vswr if math.isfinite(vswr) else np.nan)
    fig, ax = plt.subplots(figsize=(7,5))
    ax.plot(np.array(f_array_hz)*1e-9, vs, linewidth=2)
    ax.set_xlabel('Frequency (GHz)')
    ax.set_ylabel('VSWR')
    ax.set_title('VSWR vs Frequency')
    ax.grid(True, linestyle="--", alpha=0.6)
    fig.tight_layout()
    fig.savefig(savepath, dpi=120)
    plt.close(fig)
