import os
import sys

import config
from config import DEFAULT_INPUTS, FREQUENCY_UNITS
from core.analysis import analyze
from core.exceptions import BodeZError
from core.frequency_response import SweepOptions
from core.polynomial import format_coefficients
from helpers.plot import plot_dashboard
from helpers.report import (
    format_frequency_table,
    format_summary,
    format_time_table,
    save_tables,
)
from helpers.session import ResponseSession

USAGE = (
    "usage: python main.py numCoeff [denCoeff [startFreq [2|3|4 [units [sampRate]]]]]"
)


class BodeZApp:
    """
    Main Application Controller for the BodeZ Z-domain response viewer.

    This class handles:
    1. Reading the six inputs from the command line (missing ones keep defaults).
    2. An interactive CLI menu to edit inputs and recompute.
    3. Showing the frequency and time tables, plotting and saving them.
    """

    def __init__(self, args=None):
        """
        Initialize inputs from config defaults, then overlay positional args
        in order: numerator, denominator, start freq, decades, units, rate.
        """
        args = list(args or [])
        self.inputs = dict(DEFAULT_INPUTS)
        keys = [
            "numerator",
            "denominator",
            "start_frequency",
            "decade_count",
            "frequency_unit",
            "sample_rate",
        ]
        if not args or len(args) > len(keys):
            print(USAGE)
        else:
            for key, value in zip(keys, args):
                self.inputs[key] = value

        self.session = ResponseSession(compute=self.analyze_inputs)
        self.hide_phase = False
        self.running = True

    @property
    def analysis(self):
        return self.session.current

    def clear_screen(self):
        os.system("cls" if os.name == "nt" else "clear")

    def print_header(self):
        print("\n" + "=" * 60)
        print("   BodeZ | Z-Domain Bode/Nyquist Plot   ")
        print("=" * 60)
        print(f"Numerator:   {self.inputs['numerator']}")
        print(f"Denominator: {self.inputs['denominator']}")
        print(
            f"Start freq.: {self.inputs['start_frequency']} {self.inputs['frequency_unit']}"
            f" | Decades: {self.inputs['decade_count']}"
            f" | Sample rate: {self.inputs['sample_rate']}"
        )
        print("-" * 60)

    def build_options(self, inputs=None):
        inputs = self.inputs if inputs is None else inputs
        unit = inputs["frequency_unit"]
        # menu may hold the unit's index instead of its label
        if isinstance(unit, str) and unit.isdigit() and int(unit) < len(FREQUENCY_UNITS):
            unit = FREQUENCY_UNITS[int(unit)]
        return SweepOptions(inputs["decade_count"], unit)

    def analyze_inputs(self, inputs):
        """Option errors count as a failed request, like parse errors."""
        return analyze(
            inputs["numerator"],
            inputs["denominator"],
            inputs["start_frequency"],
            inputs["sample_rate"],
            self.build_options(inputs),
        )

    def compute(self):
        """
        Validates the inputs and recomputes. Errors are printed, never fatal.

        Returns:
            bool: True if a new result is available.
        """
        try:
            result = self.session.compute(dict(self.inputs))
        except BodeZError as e:
            print(e)
            return False

        print(f">>Numerator: {format_coefficients(result.tf.num)}")
        print(f"Denominator: {format_coefficients(result.tf.den)}")
        print(f"Start freq.: {result.start_frequency} {result.frequency.frequency_unit}")
        print(f"Sample rate: {result.sample_rate} samp/sec")
        return True

    def main_menu(self):
        """
        Displays the main menu loop and handles user input routing.
        """
        self.clear_screen()
        self.compute()
        while self.running:
            self.print_header()
            print("[1] Edit Numerator")
            print("[2] Edit Denominator")
            print("[3] Edit Start Frequency / Units")
            print("[4] Edit Decades")
            print("[5] Edit Sample Rate")
            print("[6] Show Frequency Response Table")
            print("[7] Show Impulse / Step Table")
            print("[8] Plot Bode / Nyquist / Impulse")
            print(f"[9] Toggle Phase Display (hidden={self.hide_phase})")
            print("[s] Save Tables to File")
            print("[q] Exit")

            choice = input("\nSelect Option: ").strip()

            if choice == "1":
                self.edit_field("numerator", "Numerator coefficients")
            elif choice == "2":
                self.edit_field("denominator", "Denominator coefficients")
            elif choice == "3":
                self.edit_frequency()
            elif choice == "4":
                self.edit_field("decade_count", "Decades (2, 3 or 4)")
            elif choice == "5":
                self.edit_field("sample_rate", "Sample rate (samp/sec)")
            elif choice == "6":
                self.show_frequency_table()
            elif choice == "7":
                self.show_time_table()
            elif choice == "8":
                self.run_plot()
            elif choice == "9":
                self.hide_phase = not self.hide_phase
            elif choice == "s":
                self.save()
            elif choice == "q":
                self.running = False
            else:
                input("Invalid option. Press Enter...")

    def edit_field(self, key, prompt):
        value = input(f"{prompt} [{self.inputs[key]}]: ").strip()
        if value:
            self.inputs[key] = value
            self.compute()

    def edit_frequency(self):
        value = input(
            f"Start frequency [{self.inputs['start_frequency']}]: "
        ).strip()
        if value:
            self.inputs["start_frequency"] = value

        for i, unit in enumerate(FREQUENCY_UNITS):
            print(f"  [{i}] {unit}")
        unit = input(f"Units [{self.inputs['frequency_unit']}]: ").strip()
        if unit:
            self.inputs["frequency_unit"] = unit
        self.compute()

    def _require_result(self):
        if self.analysis is None:
            if self.session.error is not None:
                print(f"Last input was rejected: {self.session.error}")
            print("No valid result. Fix the inputs first.")
            return False
        return True

    def show_frequency_table(self):
        if not self._require_result():
            return
        print(format_frequency_table(self.analysis.frequency))
        print(format_summary(self.analysis))

    def show_time_table(self):
        if not self._require_result():
            return
        if self.analysis.time.is_empty:
            print("No time response available.")
            return
        print(format_time_table(self.analysis.time, self.analysis.sample_rate))

    def run_plot(self):
        if not self._require_result():
            return
        plot_dashboard(self.analysis, hide_phase=self.hide_phase)

    def save(self):
        if not self._require_result():
            return
        path = input(f"File name [{config.REPORT_PARAMS['output_file']}]: ").strip()
        try:
            written = save_tables(self.analysis, path or None)
        except OSError as e:
            print(f"Could not save tables: {e}")
            return
        print(f"Tables saved to {written}")


def main(argv=None):
    app = BodeZApp(sys.argv[1:] if argv is None else argv)
    try:
        app.main_menu()
    except (KeyboardInterrupt, EOFError):
        print("\nExiting.")


if __name__ == "__main__":
    main()
