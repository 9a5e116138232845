"""
Pytest configuration and shared fixtures for include analyzer tests.
"""
import pytest

from include_analyzer.core.errors import FilesystemError


class RecordingSizeLookup:
    """Dict-backed size lookup that remembers every path it was asked for."""
    
    def __init__(self, sizes):
        self.sizes = sizes
        self.calls = []
    
    def __call__(self, path):
        self.calls.append(path)
        try:
            return self.sizes[path]
        except KeyError:
            raise FilesystemError(path, 'No such file or directory') from None


@pytest.fixture
def make_size_lookup():
    """Return a factory for RecordingSizeLookup instances."""
    return RecordingSizeLookup


@pytest.fixture
def gcc_sizes():
    """Sizes of the files named in gcc_trace."""
    return {
        '/src/app/main.h': 100,
        '/usr/include/stdio.h': 1000,
        '/usr/include/features.h': 500,
        '/src/app/config.h': 50,
        '/src/app/util.h': 30,
    }


@pytest.fixture
def gcc_trace():
    """Sample g++ -H output, including an unguarded repeat and the guard hint section."""
    return (
        ". /src/app/main.h\n"
        ".. /usr/include/stdio.h\n"
        "... /usr/include/features.h\n"
        ".. /src/app/config.h\n"
        ". /usr/include/stdio.h\n"
        ". /src/app/util.h\n"
        ".. /src/app/config.h\n"
        "Multiple include guards may be useful for:\n"
        "/src/app/config.h\n"
    )


@pytest.fixture
def msvc_sizes():
    """Sizes of the files named in msvc_trace, keyed by their first spelling."""
    return {
        'C:/Project/Include/Main.h': 200,
        'C:/SDK/stdio.h': 800,
        'C:/SDK/corecrt.h': 400,
    }


@pytest.fixture
def msvc_trace():
    """Sample cl.exe /showIncludes output with a differently cased repeat."""
    return (
        "main.cpp\r\n"
        "Note: including file: C:\\Project\\Include\\Main.h\r\n"
        "Note: including file:  C:\\SDK\\stdio.h\r\n"
        "Note: including file:   C:\\SDK\\corecrt.h\r\n"
        "Note: including file: c:/project/include/main.h\r\n"
    )


@pytest.fixture
def header_tree(tmp_path):
    """
    Create real header files and a gcc trace naming them.
    
    Returns:
        Tuple of (trace_file_path, {normalized_name: size})
    """
    include_dir = tmp_path / "include"
    (include_dir / "lib").mkdir(parents=True)
    
    files = {
        include_dir / "App.h": b"#pragma once\n#include <lib/core.h>\n",
        include_dir / "lib" / "core.h": b"#pragma once\nint core(void);\n" * 4,
        include_dir / "lib" / "extra.h": b"#pragma once\n",
    }
    for path, content in files.items():
        path.write_bytes(content)
    
    app_h = include_dir / "App.h"
    core_h = include_dir / "lib" / "core.h"
    extra_h = include_dir / "lib" / "extra.h"
    trace = (
        f". {app_h}\n"
        f".. {core_h}\n"
        f". {extra_h}\n"
        f".. {core_h}\n"
    )
    trace_file = tmp_path / "includes.txt"
    trace_file.write_text(trace)
    
    sizes = {str(path).lower(): len(content) for path, content in files.items()}
    return str(trace_file), sizes
