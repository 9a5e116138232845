#!/usr/bin/env python3
"""
Include Trace Analyzer - Command Line Interface
"""

import sys
from include_analyzer import IncludeAnalyzer, IncludeAnalyzerError
from include_analyzer.formatters import to_graphviz, render_path_tree
from include_analyzer.web import prepare_results


def format_summary(analyzer, top_files=20):
    """Plain text summary of a completed analysis."""
    results = prepare_results(analyzer, top_files=top_files)
    summary = results['summary']
    lines = [
        f"Dialect: {summary['dialect']}",
        f"Files: {summary['total_files']} ({summary['total_includes']} includes, "
        f"{summary['direct_includes']} direct)",
        f"Distinct file size: {summary['total_size_formatted']}",
        f"Expanded header text: {summary['expanded_bytes_formatted']}",
        f"Guarded includes: {summary['guarded_includes']}",
        f"Deepest nesting: {summary['max_depth']}",
        "",
        "Heaviest files (own size + newly pulled in):",
    ]
    for f in results['files']:
        lines.append(f"  {f['size_dependencies_formatted']:>12}  {f['name']}  (included {f['included_count']}x)")
    return '\n'.join(lines)


def main():
    import argparse
    parser = argparse.ArgumentParser(
        description='Analyze compiler include traces (g++ -H or cl.exe /showIncludes).',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  g++ -H -E -o /dev/null source.cpp 2> includes.txt
  python analyze_includes.py includes.txt
  python analyze_includes.py includes.txt --format dot -o includes.dot
  python analyze_includes.py includes.txt --format paths
  python analyze_includes.py includes.txt --format order --max-depth 2
  python analyze_includes.py includes.txt --dialect msvc --base-dir C:/src/project
        """
    )
    parser.add_argument('input_file', help='Path to the include trace')
    parser.add_argument('-o', '--output', dest='output_file', default=None,
                        help='Write the report to this file instead of stdout')
    parser.add_argument('--format', dest='output_format', default='summary',
                        choices=['summary', 'dot', 'paths', 'paths-dot', 'order'],
                        help='Report to produce')
    parser.add_argument('--dialect', choices=['gcc', 'msvc'], default=None,
                        help='Trace format (default: detected from the first character)')
    parser.add_argument('--base-dir', default=None,
                        help='Directory relative paths in the trace are resolved against')
    parser.add_argument('--max-depth', type=int, default=None,
                        help='Deepest nesting level listed in the order report')
    args = parser.parse_args()
    
    try:
        analyzer = IncludeAnalyzer(
            dialect=args.dialect,
            base_dir=args.base_dir,
            max_depth=args.max_depth
        )
    except ValueError as e:
        parser.error(str(e))
    
    try:
        print(f"\nConfiguration:")
        print(f"  Input file: {args.input_file}")
        print(f"  Dialect: {args.dialect or 'auto'}")
        print(f"  Base directory: {analyzer.config.base_dir}")
        print(f"  Report: {args.output_format}\n")
        analyzer.process_trace_file(args.input_file)
    except IncludeAnalyzerError as e:
        print(f"Error: {e}")
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)
    
    if args.output_format == 'dot':
        report = to_graphviz(analyzer.graph)
    elif args.output_format == 'paths':
        report = render_path_tree(analyzer.path_graph)
    elif args.output_format == 'paths-dot':
        report = to_graphviz(analyzer.path_graph)
    elif args.output_format == 'order':
        report = analyzer.inclusion_report.render()
    else:
        report = format_summary(analyzer)
    
    if args.output_file:
        with open(args.output_file, 'w') as f:
            f.write(report + '\n')
        print(f"\n✓ Report written to {args.output_file}")
    else:
        print()
        print(report)


if __name__ == "__main__":
    main()
