# mentorium/main.py
"""Main entry point for mentorium"""
import argparse
import os
import sys
from typing import Dict, Any, List

from mentorium.config import (
    DATA_DIR, DEFAULT_NUM_MENTORS, DEMO_STUDENT_COUNT, TEMPLATE_FILE,
    OUTPUT_FILE, WORKBOOK_FILE, REPORT_FILE,
)
from mentorium.allocation import AllocationEngine
from mentorium.analysis import RosterAnalyzer, StatsCalculator
from mentorium.demo import generate_demo_students
from mentorium.exceptions import MentoriumError
from mentorium.io import DataLoader, ResultSaver, ReportGenerator
from mentorium.models import AssignmentResult, MentorStats
from mentorium.utils import clamp_mentor_count

EXIT_OK = 0
EXIT_VALIDATION = 1
EXIT_USAGE = 2


class OutputFormatter:
    """Formats and displays allocation results"""

    @staticmethod
    def print_analysis(analysis: Dict[str, Any]):
        """Print roster analysis"""
        print(f"\n📊 Roster Summary:")
        print(f"   Students: {analysis['total_students']}")
        if analysis['invalid_scores']:
            print(f"   Without a usable CWA: {analysis['invalid_scores']}")
        print(f"   Average CWA: {analysis['average_cwa']}")
        print(f"   Highest / Lowest: {analysis['highest_cwa']} / {analysis['lowest_cwa']}")
        bands = {k: v for k, v in analysis['score_bands'].items() if v}
        print(f"   Score Bands: {bands}")

    @staticmethod
    def print_errors(errors: List[str]):
        """Print validation errors"""
        print(f"\n❌ VALIDATION ISSUES ({len(errors)}):")
        print("-"*80)
        for error in errors:
            print(f"   • {error}")

    @staticmethod
    def print_results(result: AssignmentResult, stats: List[MentorStats]):
        """Pretty print allocation results"""
        print("\n" + "="*80)
        print("📋 ALLOCATION RESULTS")
        print("="*80)
        print(f"   Mentors: {result.num_mentors} | Students: {result.total_students} | "
              f"Passes: {' → '.join(result.passes) or 'none'}")

        for assignment, s in zip(result.assignments, stats):
            print(f"\n👤 Mentor {assignment.display_number} - {s.count} mentees "
                  f"• avg {s.average_cwa} • hi {s.highest_cwa} • lo {s.lowest_cwa}")
            for student in assignment.students:
                print(f"      {student.student_id}  {student.index_no}  "
                      f"{student.cwa:>6.2f}  {student.name}")

        print("\n" + "="*80)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='mentorium',
        description='Allocate students to mentors with a bidirectional score-based round robin',
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument('--input', '-i', help='Roster file (.xlsx, .xls, .csv or .json)')
    source.add_argument('--demo', action='store_true', help='Use a generated demo roster')
    source.add_argument('--template', action='store_true',
                        help='Write an empty upload template and exit')
    parser.add_argument('--count', type=int, default=DEMO_STUDENT_COUNT,
                        help='Number of demo students')
    parser.add_argument('--seed', type=int, default=None, help='Seed for the demo roster')
    parser.add_argument('--mentors', '-m', type=int, default=DEFAULT_NUM_MENTORS,
                        help='Number of mentors')
    parser.add_argument('--output-dir', '-o', default=DATA_DIR, help='Where results are written')
    parser.add_argument('--no-report', action='store_true', help='Skip the PDF report')
    parser.add_argument('--force', action='store_true',
                        help='Allocate even when the roster has validation issues')
    return parser


def main(argv: List[str] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)
    saver = ResultSaver(args.output_dir)

    if args.template:
        path = os.path.join(args.output_dir, TEMPLATE_FILE)
        saver.write_template(path)
        print(f"📄 Template written to {path}")
        return EXIT_OK

    # Load data
    print("📂 Loading data...")
    if args.input:
        try:
            parsed = DataLoader.load_students(args.input)
        except MentoriumError as e:
            print(f"❌ {e}")
            return EXIT_USAGE
        if parsed.errors:
            OutputFormatter.print_errors(parsed.errors)
            if not args.force:
                print("\nFix the roster or pass --force to allocate anyway.")
                return EXIT_VALIDATION
        students = parsed.students
    else:
        students = generate_demo_students(args.count, seed=args.seed)
        print(f"Generated {len(students)} demo students")

    OutputFormatter.print_analysis(RosterAnalyzer.analyze(students))

    if args.mentors < 1:
        print(f"❌ Number of mentors must be at least 1 (got {args.mentors})")
        return EXIT_USAGE
    num_mentors = clamp_mentor_count(args.mentors, len(students))
    if num_mentors != args.mentors:
        print(f"⚠️  Only {len(students)} students; using {num_mentors} mentors")

    # Run allocation
    result = AllocationEngine.allocate(students, num_mentors)
    stats = StatsCalculator.calculate(result.assignments)

    OutputFormatter.print_results(result, stats)

    # Build and save outputs
    saver.save_final_results(
        AllocationEngine.build_complete_output(result),
        os.path.join(args.output_dir, os.path.basename(OUTPUT_FILE)),
    )
    workbook = os.path.join(args.output_dir, os.path.basename(WORKBOOK_FILE))
    saver.export_workbook(result, workbook, stats)
    print(f"📊 Workbook saved to {workbook}")

    if not args.no_report:
        report = os.path.join(args.output_dir, os.path.basename(REPORT_FILE))
        ReportGenerator().generate(result, report, stats)
        print(f"📄 Report saved to {report}")

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
