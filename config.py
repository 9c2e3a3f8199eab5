"""
Central Configuration Module for BodeZ.

Holds the default transfer function, the fixed sweep and time-response
geometry, report headers and plot styling. See the notes at the end of the
file for what each block controls.
"""

DEFAULT_INPUTS = {
    "numerator": "0.00439456;(1,2,1)",
    "denominator": "1,-1.734834,0.752412",
    "start_frequency": "100",
    "decade_count": 2,
    "frequency_unit": "cyc/sec",
    "sample_rate": "44100",
}

FREQUENCY_UNITS = ("rad/samp", "cyc/samp", "rad/sec", "cyc/sec")

SWEEP_PARAMS = {
    "num_points": 601,
    "decade_resolution": {
        2: 300,
        3: 200,
        4: 150,
    },
}

TIME_RESPONSE_PARAMS = {
    "num_samples": 512,
    "extrema_window": 500,
}

REPORT_PARAMS = {
    "frequency_header": "Freq. ({unit})\tComplex Resp.",
    "time_header": "Time (sec)\tImpulse Response\tStep Function",
    "output_file": "bodez_results.txt",
}

PLOT_PARAMS = {
    "figsize": (12, 8),
    "grid_alpha": 0.3,
    "gain_color": "blue",
    "phase_color": "magenta",
    "aliased_color": "lightgray",
    "impulse_color": "#1f77b4",
    "step_color": "#d62728",
    "gain_limits_db": (-90.0, 90.0),
}

"""
--------------------------------------------------------------------------------
1. DEFAULT_INPUTS (Startup Transfer Function)
--------------------------------------------------------------------------------
Values used when the command line does not supply them.
The defaults describe a second-order low-pass section (gain 0.00439456,
numerator (1 + z^-1)^2) sampled at 44.1 kHz.

Parameters:
- numerator / denominator: Coefficient text.
    * Ascending powers of z^-1, comma or space separated.
    * Bracketed factors "(1,1)(1,-1)" or ";"-separated factors are multiplied.
- start_frequency: First frequency of the sweep, in frequency_unit.
- decade_count: 2, 3 or 4 decades swept.
- frequency_unit: One of FREQUENCY_UNITS.
- sample_rate (samp/sec): Used by the per-second units and the time axis.

--------------------------------------------------------------------------------
2. SWEEP_PARAMS (Frequency Response)
--------------------------------------------------------------------------------
- num_points: Number of sweep frequencies. Fixed at 601.
- decade_resolution: Points per decade for each decade count.
    * 601 points always cover exactly decade_count decades.

--------------------------------------------------------------------------------
3. TIME_RESPONSE_PARAMS (Impulse / Step)
--------------------------------------------------------------------------------
- num_samples: Length of the impulse and step sequences. Fixed at 512.
- extrema_window: Only samples [0, extrema_window) contribute to the
  min/max used for plot scaling.

--------------------------------------------------------------------------------
4. REPORT_PARAMS (Text Tables)
--------------------------------------------------------------------------------
- frequency_header / time_header: First line of each table.
- output_file: Default file name used by the "Save tables" menu entry.

--------------------------------------------------------------------------------
5. PLOT_PARAMS (Visualization)
--------------------------------------------------------------------------------
Settings for the Matplotlib interface.

- aliased_color: Color for sweep samples at or past the Nyquist limit.
- gain_limits_db: Clamp for the gain axis when the response has poles
  or zeros on the unit circle.
"""
