#!/usr/bin/env python3
"""
Offset Table Example

Prints travel and run for one offset distance at every supported angle, then
writes a diagram for each jobs.yaml entry.

Outputs:
- Offset table on stdout
- SVG diagrams in examples/output/
"""

from pathlib import Path

from pypeoffset import (
    OffsetCalculator,
    OffsetJobFile,
    OffsetParameters,
    build_diagram,
    format_result,
    write_svg,
)


def main():
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    calculator = OffsetCalculator()

    print("Offset Table (rise = 250 mm)")
    print("=" * 50)
    print(f"{'Angle':>8} {'Travel':>12} {'Run':>12}")
    for angle in calculator.get_supported_angles():
        result = calculator.calculate_offset(OffsetParameters(offset_distance=250, angle=angle))
        print(f"{angle:>7}° {result.travel:>12.2f} {result.run:>12.2f}")

    job_file = OffsetJobFile.from_yaml(Path(__file__).parent / "jobs.yaml")
    for job in job_file.jobs:
        result = calculator.calculate_offset(job.to_parameters())
        print(f"\n{job.id}: {job.description}")
        print(format_result(result, job_file.settings.precision))

        svg_path = write_svg(build_diagram(result.diagram), output_dir / f"{job.id}.svg")
        print(f"Exported SVG: {svg_path}")


if __name__ == "__main__":
    main()
