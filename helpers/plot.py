"""
Centralized plotting utilities for BodeZ.
All visualization logic lives here to keep the engine headless.
"""

import matplotlib.pyplot as plt
import numpy as np

from config import PLOT_PARAMS


def _masked(values):
    """Masks NaN/inf so matplotlib breaks the line instead of failing to scale."""
    values = np.asarray(values, dtype=float)
    return np.ma.masked_invalid(values)


def _split_at_nyquist(x, y, nyquist_idx):
    if nyquist_idx is None:
        return (x, y), None
    # overlap by one sample so the two segments join
    return (x[: nyquist_idx + 1], y[: nyquist_idx + 1]), (x[nyquist_idx:], y[nyquist_idx:])


def draw_bode(ax_gain, ax_phase, freq_result, hide_phase=False):
    f = freq_result.display_frequencies()
    nyq = freq_result.nyquist_index()
    lo, hi = PLOT_PARAMS["gain_limits_db"]
    gain = _masked(np.clip(freq_result.gain_db(), lo, hi))

    inband, aliased = _split_at_nyquist(f, gain, nyq)
    ax_gain.semilogx(*inband, color=PLOT_PARAMS["gain_color"], lw=1.5, label="Gain")
    if aliased is not None:
        ax_gain.semilogx(*aliased, color=PLOT_PARAMS["aliased_color"], lw=1.5)
    ax_gain.set_ylabel("Gain (dB)", color=PLOT_PARAMS["gain_color"])
    ax_gain.set_xlabel(f"Freq. ({freq_result.frequency_unit})")
    ax_gain.grid(True, which="both", alpha=PLOT_PARAMS["grid_alpha"])
    ax_gain.set_title("Bode Plot")

    if hide_phase or ax_phase is None:
        return

    phase = _masked(freq_result.phase_deg())
    inband, aliased = _split_at_nyquist(f, phase, nyq)
    ax_phase.semilogx(*inband, color=PLOT_PARAMS["phase_color"], lw=1.0, label="Phase")
    if aliased is not None:
        ax_phase.semilogx(*aliased, color=PLOT_PARAMS["aliased_color"], lw=1.0)
    ax_phase.set_ylabel("Phase (deg)", color=PLOT_PARAMS["phase_color"])
    ax_phase.set_ylim(-180, 180)
    ax_phase.set_yticks(np.arange(-180, 181, 45))


def draw_nyquist(ax, freq_result):
    values = freq_result.as_array()
    nyq = freq_result.nyquist_index()
    re = _masked(values.real)
    im = _masked(values.imag)

    inband, aliased = _split_at_nyquist(re, im, nyq)
    ax.plot(*inband, color=PLOT_PARAMS["gain_color"], lw=1.5)
    if aliased is not None:
        ax.plot(*aliased, color=PLOT_PARAMS["aliased_color"], lw=1.5)

    if freq_result.real_bounds is not None and freq_result.imag_bounds is not None:
        ax.set_xlim(*_padded(freq_result.real_bounds))
        ax.set_ylim(*_padded(freq_result.imag_bounds))

    ax.axhline(0, color="k", lw=1)
    ax.axvline(0, color="k", lw=1)
    ax.set_title("Nyquist Plot")
    ax.set_xlabel("Real")
    ax.set_ylabel("Imaginary")
    ax.grid(True, alpha=PLOT_PARAMS["grid_alpha"])


def draw_time_response(ax, time_result, sample_rate):
    if time_result.is_empty:
        ax.text(0.5, 0.5, "No Time Response Data", ha="center")
        return

    t = time_result.times(sample_rate)
    ax.plot(
        t,
        _masked(time_result.impulse),
        color=PLOT_PARAMS["impulse_color"],
        label="Impulse Response",
    )
    ax.plot(
        t,
        _masked(time_result.step),
        color=PLOT_PARAMS["step_color"],
        label="Step Function",
    )

    bounds = _merge_bounds(time_result.impulse_bounds, time_result.step_bounds)
    if bounds is not None:
        ax.set_ylim(*_padded(bounds))

    ax.set_title("Impulse / Step Response")
    ax.set_xlabel("Time (sec)")
    ax.grid(True, alpha=PLOT_PARAMS["grid_alpha"])
    ax.legend(fontsize=8)


def _merge_bounds(a, b):
    if a is None:
        return b
    if b is None:
        return a
    return min(a[0], b[0]), max(a[1], b[1])


def _padded(bounds, frac=0.05):
    lo, hi = bounds
    span = hi - lo
    pad = span * frac if span > 0 else max(abs(hi), 1.0) * frac
    return lo - pad, hi + pad


def plot_dashboard(analysis, hide_phase=False):
    fig, axes = plt.subplots(2, 2, figsize=PLOT_PARAMS["figsize"])
    ax_gain, ax_nyquist = axes[0, 0], axes[0, 1]
    ax_time, ax_info = axes[1, 0], axes[1, 1]

    freq_result = analysis.frequency
    if freq_result.is_empty:
        ax_gain.text(0.5, 0.5, "Error: nothing to plot.", ha="center")
        ax_nyquist.text(0.5, 0.5, "Error: nothing to plot.", ha="center")
    else:
        ax_phase = None if hide_phase else ax_gain.twinx()
        draw_bode(ax_gain, ax_phase, freq_result, hide_phase=hide_phase)
        draw_nyquist(ax_nyquist, freq_result)

    draw_time_response(ax_time, analysis.time, analysis.sample_rate)

    ax_info.axis("off")
    ax_info.text(
        0.0,
        1.0,
        f"Num: {analysis.tf.num.tolist()}\n"
        f"Den: {analysis.tf.den.tolist()}\n"
        f"Start: {analysis.start_frequency} {analysis.options.frequency_unit}\n"
        f"Decades: {analysis.options.decade_count}\n"
        f"Sample rate: {analysis.sample_rate} samp/sec",
        va="top",
        family="monospace",
        fontsize=9,
    )

    plt.tight_layout()
    plt.show()
