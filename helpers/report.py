"""
Text rendering of analysis results.
Produces the tab-separated tables shown in the terminal and saved to disk.
"""

from config import REPORT_PARAMS
from core.complex_number import format_scientific


def format_complex(value):
    """'+1.234560E-2-3.210000E-3i' style, both parts signed."""
    return (
        format_scientific(value.real, signed=True)
        + format_scientific(value.imag, signed=True)
        + "i"
    )


def frequency_table_lines(result):
    lines = [REPORT_PARAMS["frequency_header"].format(unit=result.frequency_unit)]
    for freq, value in result.rows():
        lines.append(f"{format_scientific(freq)}\t{format_complex(value)}")
    return lines


def time_table_lines(result, sample_rate):
    lines = [REPORT_PARAMS["time_header"]]
    for t, imp, stp in result.rows(sample_rate):
        lines.append(
            f"{format_scientific(t)}\t{format_scientific(imp)}\t{format_scientific(stp)}"
        )
    return lines


def format_frequency_table(result):
    return "\n".join(frequency_table_lines(result)) + "\n"


def format_time_table(result, sample_rate):
    return "\n".join(time_table_lines(result, sample_rate)) + "\n"


def format_summary(analysis):
    """Short console summary of extrema, 'n/a' where no bound exists."""

    def _bounds(b):
        if b is None:
            return "n/a"
        return f"[{format_scientific(b[0])}, {format_scientific(b[1])}]"

    freq = analysis.frequency
    time = analysis.time
    return "\n".join(
        [
            f"Transfer function: {analysis.tf!r}",
            f"  Real part range:  {_bounds(freq.real_bounds)}",
            f"  Imag part range:  {_bounds(freq.imag_bounds)}",
            f"  Impulse range:    {_bounds(time.impulse_bounds)}",
            f"  Step range:       {_bounds(time.step_bounds)}",
        ]
    )


def save_tables(analysis, path=None):
    """Writes both tables to a text file and returns the path used."""
    path = path or REPORT_PARAMS["output_file"]
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(format_frequency_table(analysis.frequency))
        fh.write("\n")
        fh.write(format_time_table(analysis.time, analysis.sample_rate))
    return path
