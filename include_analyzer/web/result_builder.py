"""
Result builder for web interface output.
"""

from ..formatters import build_path_tree


def prepare_results(analyzer, top_files: int = 50):
    """
    Convert analyzer results to a structured format for JSON output.
    
    File sizes come in two flavours: 'size' is the file's own size and
    'size_dependencies' is its own size plus the distinct files first pulled
    in beneath it. The summary's 'expanded_bytes' and 'occurrence_bytes'
    come from the inclusion order replay instead.
    
    Args:
        analyzer: IncludeAnalyzer instance with completed analysis
        top_files: Number of files listed, heaviest first
        
    Returns:
        Dictionary with structured results for rendering
    """
    graph = analyzer.graph
    report = analyzer.inclusion_report
    root = graph[graph.root]
    
    # Section 1: Files, heaviest dependency footprint first
    files = []
    for handle in graph.file_vertices():
        vertex = graph[handle]
        files.append({
            'name': vertex.name,
            'size': vertex.size,
            'size_formatted': analyzer.format_size(vertex.size),
            'size_dependencies': vertex.size_dependencies,
            'size_dependencies_formatted': analyzer.format_size(vertex.size_dependencies),
            'included_count': vertex.included_count,
        })
    
    files.sort(key=lambda x: (-x['size_dependencies'], x['name']))
    
    # Section 2: Most included headers
    most_included = sorted(files, key=lambda x: (-x['included_count'], x['name']))
    most_included = [
        {'name': f['name'], 'included_count': f['included_count']}
        for f in most_included[:top_files]
        if f['included_count'] > 1
    ]
    
    # Section 3: Direct includes of the translation unit
    direct_includes = [graph[handle].name for handle in graph.out_edges(graph.root)]
    
    final_results = {
        'summary': {
            'dialect': analyzer.dialect.name,
            'total_files': len(graph) - 1,
            'total_includes': graph.edge_count,
            'direct_includes': len(direct_includes),
            'total_size': root.size_dependencies,
            'total_size_formatted': analyzer.format_size(root.size_dependencies),
            'expanded_bytes': report.expanded_bytes,
            'expanded_bytes_formatted': analyzer.format_size(report.expanded_bytes),
            'occurrence_bytes': report.occurrence_bytes,
            'occurrence_bytes_formatted': analyzer.format_size(report.occurrence_bytes),
            'guarded_includes': report.guarded_count,
            'max_depth': report.deepest,
        },
        'files': files[:top_files],
        'most_included': most_included,
        'direct_includes': direct_includes,
        'path_tree': build_path_tree(analyzer.path_graph),
        'inclusion_order': report.entries,
    }
    return final_results
