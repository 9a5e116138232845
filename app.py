#!/usr/bin/env python3
"""
Flask Web Application for the Include Trace Analyzer
Provides REST API endpoints for analyzing compiler include traces.
"""

from flask import Flask, request, jsonify, Response
from werkzeug.utils import secure_filename
import os
import tempfile
from include_analyzer import IncludeAnalyzer, IncludeAnalyzerError
from include_analyzer.formatters import to_graphviz
from include_analyzer.web import prepare_results

app = Flask(__name__)
app.config['MAX_CONTENT_LENGTH'] = 100 * 1024 * 1024
app.config['UPLOAD_FOLDER'] = tempfile.gettempdir()

ALLOWED_EXTENSIONS = {'txt', 'log'}

def allowed_file(filename):
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS


def analyze_upload():
    """
    Validate the uploaded trace and run the analyzer on it.
    Returns: (analyzer, None) on success or (None, (json_response, status)) on failure
    """
    if 'file' not in request.files:
        return None, (jsonify({'error': 'No file provided'}), 400)
    
    file = request.files['file']
    
    if not file.filename:
        return None, (jsonify({'error': 'No file selected'}), 400)
    
    if not allowed_file(file.filename):
        return None, (jsonify({'error': 'Invalid file type. Only .txt and .log traces are allowed.'}), 400)
    
    dialect = request.form.get('dialect') or None
    base_dir = request.form.get('base_dir') or None
    max_depth = request.form.get('max_depth') or None
    
    try:
        analyzer = IncludeAnalyzer(
            dialect=dialect,
            base_dir=base_dir,
            max_depth=int(max_depth) if max_depth else None
        )
    except ValueError as e:
        return None, (jsonify({'error': str(e)}), 400)
    
    filename = secure_filename(file.filename)
    filepath = os.path.join(app.config['UPLOAD_FOLDER'], filename)
    file.save(filepath)
    
    try:
        analyzer.process_trace_file(filepath)
    except IncludeAnalyzerError as e:
        return None, (jsonify({'error': str(e)}), 400)
    except Exception as e:
        return None, (jsonify({'error': str(e)}), 500)
    finally:
        os.remove(filepath)
    
    return analyzer, None


@app.route('/api/analyze', methods=['POST'])
def analyze_api():
    """
    API endpoint to analyze an include trace.
    Accepts: multipart/form-data with fields:
      - 'file': trace text file (g++ -H or cl.exe /showIncludes output)
      - 'dialect': 'gcc'|'msvc' (optional, default: detected)
      - 'base_dir': directory relative trace paths resolve against (optional)
      - 'max_depth': deepest level listed in the inclusion order (optional)
    Returns: JSON with analysis results
    """
    analyzer, error = analyze_upload()
    if error:
        return error
    
    return jsonify(prepare_results(analyzer))


@app.route('/api/graphviz', methods=['POST'])
def graphviz_api():
    """
    API endpoint returning the include graph in Graphviz DOT format.
    Accepts the same fields as /api/analyze plus:
      - 'view': 'files'|'paths' (optional, default: 'files')
    Returns: text/vnd.graphviz
    """
    view = request.form.get('view', 'files')
    if view not in ('files', 'paths'):
        return jsonify({'error': "view must be 'files' or 'paths'"}), 400
    
    analyzer, error = analyze_upload()
    if error:
        return error
    
    graph = analyzer.path_graph if view == 'paths' else analyzer.graph
    return Response(to_graphviz(graph), mimetype='text/vnd.graphviz')


if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=5001)
