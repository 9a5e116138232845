"""
Unit tests for include_analyzer.processors.trace_parser module.
"""
import pytest

from include_analyzer.core.errors import FilesystemError, MalformedTraceError
from include_analyzer.extractors.dialects import GCC, MSVC
from include_analyzer.processors.trace_parser import TraceParser


def edge_names(graph):
    """All edges as (source_name, target_name) pairs, in insertion order per source."""
    return [(graph[s].name, graph[t].name) for s, t in graph.edges()]


def handle_of(graph, name):
    for handle in graph.vertices():
        if graph[handle].name == name:
            return handle
    raise KeyError(name)


class TestGccParsing:
    """Tests for parsing g++ -H traces."""
    
    def test_sibling_after_nested_include(self, make_size_lookup):
        """A depth-1 line after a depth-2 line is a sibling of the first file."""
        sizes = make_size_lookup({'a.h': 1, 'b.h': 2, 'c.h': 3})
        graph = TraceParser(GCC, sizes).parse(". a.h\n.. b.h\n. c.h\n")
        
        assert sorted(edge_names(graph)) == sorted([
            ('', 'a.h'),
            ('a.h', 'b.h'),
            ('', 'c.h'),
        ])
        assert len(graph) == 4
    
    def test_root_is_synthetic(self, make_size_lookup):
        """The root has an empty name and no own size."""
        graph = TraceParser(GCC, make_size_lookup({'a.h': 5})).parse(". a.h\n")
        
        root = graph[graph.root]
        assert root.name == ''
        assert root.size == 0
        assert root.size_dependencies == 5
    
    def test_edge_order_follows_trace(self, make_size_lookup, gcc_trace, gcc_sizes):
        """Outgoing edges keep the order the trace listed them in."""
        graph = TraceParser(GCC, make_size_lookup(gcc_sizes)).parse(gcc_trace)
        
        root_children = [graph[h].name for h in graph.out_edges(graph.root)]
        assert root_children == ['/src/app/main.h', '/usr/include/stdio.h', '/src/app/util.h']
        
        main = handle_of(graph, '/src/app/main.h')
        assert [graph[h].name for h in graph.out_edges(main)] == ['/usr/include/stdio.h', '/src/app/config.h']
    
    def test_noise_lines_are_skipped(self, make_size_lookup, gcc_trace, gcc_sizes):
        """Guard hints and other unmarked lines create no vertices."""
        graph = TraceParser(GCC, make_size_lookup(gcc_sizes)).parse(gcc_trace)
        
        assert len(graph) == 6
        assert graph.edge_count == 7
    
    def test_noise_does_not_change_depth(self, make_size_lookup):
        """An unmarked line between two nested lines keeps the nesting intact."""
        sizes = make_size_lookup({'a.h': 1, 'b.h': 1, 'c.h': 1})
        graph = TraceParser(GCC, sizes).parse(". a.h\n.. b.h\nIn file included from x.cpp\n.. c.h\n")
        
        assert ('a.h', 'c.h') in edge_names(graph)
    
    def test_blank_and_missing_final_newline(self, make_size_lookup):
        """Blank lines are noise and the last line needs no terminator."""
        sizes = make_size_lookup({'a.h': 1, 'b.h': 1})
        graph = TraceParser(GCC, sizes).parse("\n. a.h\n\n.. b.h")
        
        assert edge_names(graph) == [('', 'a.h'), ('a.h', 'b.h')]


class TestIdentityAndSizes:
    """Tests for vertex deduplication and size aggregation."""
    
    def test_case_fold_dedup(self, make_size_lookup):
        """Names differing only in case collapse into one vertex."""
        sizes = make_size_lookup({'Foo.H': 10})
        graph = TraceParser(GCC, sizes).parse(". Foo.H\n. foo.h\n")
        
        assert len(graph) == 2
        foo = handle_of(graph, 'foo.h')
        assert graph[foo].included_count == 2
        assert sizes.calls == ['Foo.H']
    
    def test_separator_normalization(self, make_size_lookup):
        """Backslash and slash spellings of a path are one file."""
        sizes = make_size_lookup({'inc/a.h': 7})
        graph = TraceParser(GCC, sizes).parse(". inc\\a.h\n. inc/a.h\n")
        
        assert len(graph) == 2
        assert graph[1].name == 'inc/a.h'
        assert graph[1].included_count == 2
    
    def test_one_size_lookup_per_distinct_file(self, make_size_lookup, gcc_trace, gcc_sizes):
        """First-seen size wins; repeated files are never looked up again."""
        sizes = make_size_lookup(gcc_sizes)
        TraceParser(GCC, sizes).parse(gcc_trace)
        
        assert sorted(sizes.calls) == sorted(gcc_sizes)
    
    def test_aggregate_sizes(self, make_size_lookup, gcc_trace, gcc_sizes):
        """Aggregate size is own size plus the files first discovered beneath."""
        graph = TraceParser(GCC, make_size_lookup(gcc_sizes)).parse(gcc_trace)
        
        assert graph[handle_of(graph, '/usr/include/features.h')].size_dependencies == 500
        assert graph[handle_of(graph, '/usr/include/stdio.h')].size_dependencies == 1500
        assert graph[handle_of(graph, '/src/app/main.h')].size_dependencies == 1650
        # config.h was already known when util.h pulled it in
        assert graph[handle_of(graph, '/src/app/util.h')].size_dependencies == 30
    
    def test_root_aggregate_equals_distinct_reachable(self, make_size_lookup, gcc_trace, gcc_sizes):
        """Root aggregate is the sum of every distinct reachable file's own size."""
        graph = TraceParser(GCC, make_size_lookup(gcc_sizes)).parse(gcc_trace)
        
        reachable = graph.reachable_from(graph.root)
        assert graph[graph.root].size_dependencies == sum(graph[h].size for h in reachable)
        assert graph[graph.root].size_dependencies == sum(gcc_sizes.values())
    
    def test_aggregate_never_below_own_size(self, make_size_lookup, gcc_trace, gcc_sizes):
        """Every file's aggregate size is at least its own size."""
        graph = TraceParser(GCC, make_size_lookup(gcc_sizes)).parse(gcc_trace)
        
        for handle in graph.file_vertices():
            assert graph[handle].size_dependencies >= graph[handle].size
    
    def test_included_count_is_in_degree(self, make_size_lookup, gcc_trace, gcc_sizes):
        """included_count matches the number of edges targeting each vertex."""
        graph = TraceParser(GCC, make_size_lookup(gcc_sizes)).parse(gcc_trace)
        
        in_degree = {h: 0 for h in graph.vertices()}
        for _, target in graph.edges():
            in_degree[target] += 1
        for handle in graph.vertices():
            assert graph[handle].included_count == in_degree[handle]
    
    def test_reentered_file_keeps_first_aggregate(self, make_size_lookup):
        """A file listed again with new children does not lose its first aggregate."""
        sizes = make_size_lookup({'a.h': 1, 'b.h': 2, 'c.h': 4})
        graph = TraceParser(GCC, sizes).parse(". a.h\n.. b.h\n. a.h\n.. c.h\n")
        
        assert graph[handle_of(graph, 'a.h')].size_dependencies == 3
        assert graph[graph.root].size_dependencies == 7


class TestDepthJumps:
    """Tests for lines that skip nesting levels."""
    
    def test_skipped_level_nests_under_closest_includer(self, make_size_lookup):
        """A line two levels deeper than its includer attaches to that includer."""
        sizes = make_size_lookup({'a.h': 1, 'c.h': 1, 'd.h': 1, 'e.h': 1, 'f.h': 1})
        graph = TraceParser(GCC, sizes).parse(
            ". a.h\n... c.h\n.... d.h\n... e.h\n. f.h\n"
        )
        
        assert edge_names(graph) == [
            ('', 'a.h'),
            ('', 'f.h'),
            ('a.h', 'c.h'),
            ('a.h', 'e.h'),
            ('c.h', 'd.h'),
        ]
        assert graph[handle_of(graph, 'a.h')].size_dependencies == 4
        assert graph[graph.root].size_dependencies == 5
    
    def test_trace_starting_deep(self, make_size_lookup):
        """A first line deeper than 1 attaches to the root."""
        graph = TraceParser(GCC, make_size_lookup({'x.h': 3})).parse("... x.h\n")
        
        assert edge_names(graph) == [('', 'x.h')]
        assert graph[graph.root].size_dependencies == 3


class TestMsvcParsing:
    """Tests for parsing cl.exe /showIncludes traces."""
    
    def test_depth_from_spaces(self, make_size_lookup, msvc_trace, msvc_sizes):
        """Each extra space after the note is one more nesting level."""
        graph = TraceParser(MSVC, make_size_lookup(msvc_sizes)).parse(msvc_trace)
        
        assert edge_names(graph) == [
            ('', 'c:/project/include/main.h'),
            ('', 'c:/project/include/main.h'),
            ('c:/project/include/main.h', 'c:/sdk/stdio.h'),
            ('c:/sdk/stdio.h', 'c:/sdk/corecrt.h'),
        ]
    
    def test_size_lookup_uses_original_case(self, make_size_lookup, msvc_trace, msvc_sizes):
        """Sizes are fetched with the path's own spelling and forward slashes."""
        sizes = make_size_lookup(msvc_sizes)
        TraceParser(MSVC, sizes).parse(msvc_trace)
        
        assert sizes.calls == ['C:/Project/Include/Main.h', 'C:/SDK/stdio.h', 'C:/SDK/corecrt.h']
    
    def test_msvc_sizes(self, make_size_lookup, msvc_trace, msvc_sizes):
        """The repeated include adds nothing to the root aggregate."""
        graph = TraceParser(MSVC, make_size_lookup(msvc_sizes)).parse(msvc_trace)
        
        assert graph[graph.root].size_dependencies == 1400
        assert graph[handle_of(graph, 'c:/sdk/stdio.h')].size_dependencies == 1200
        assert graph[handle_of(graph, 'c:/project/include/main.h')].included_count == 2


class TestParseErrors:
    """Tests for malformed input and failed lookups."""
    
    def test_missing_file_name(self, make_size_lookup):
        """A depth marker with no path is malformed."""
        with pytest.raises(MalformedTraceError) as exc_info:
            TraceParser(GCC, make_size_lookup({'a.h': 1})).parse(". a.h\n..\n")
        
        assert exc_info.value.line_number == 2
    
    def test_truncated_last_line(self, make_size_lookup):
        """Input ending right after a depth marker is malformed."""
        with pytest.raises(MalformedTraceError):
            TraceParser(MSVC, make_size_lookup({})).parse("Note: including file:  ")
    
    def test_msvc_entry_in_gcc_trace(self, make_size_lookup):
        """Mixing dialects is rejected."""
        trace = ". a.h\nNote: including file:  b.h\n"
        with pytest.raises(MalformedTraceError) as exc_info:
            TraceParser(GCC, make_size_lookup({'a.h': 1, 'b.h': 1})).parse(trace)
        
        assert "msvc" in str(exc_info.value)
    
    def test_gcc_entry_in_msvc_trace(self, make_size_lookup):
        """GCC lines inside an MSVC trace are rejected."""
        trace = "Note: including file: a.h\n.. b.h\n"
        with pytest.raises(MalformedTraceError):
            TraceParser(MSVC, make_size_lookup({'a.h': 1, 'b.h': 1})).parse(trace)
    
    def test_missing_file_aborts_parse(self, make_size_lookup):
        """A failed size lookup propagates as FilesystemError."""
        with pytest.raises(FilesystemError) as exc_info:
            TraceParser(GCC, make_size_lookup({'a.h': 1})).parse(". a.h\n.. gone.h\n")
        
        assert exc_info.value.path == 'gone.h'
    
    def test_empty_trace(self, make_size_lookup):
        """An empty trace yields just the root."""
        graph = TraceParser(GCC, make_size_lookup({})).parse("")
        
        assert len(graph) == 1
        assert graph.edge_count == 0
        assert graph[graph.root].size_dependencies == 0
