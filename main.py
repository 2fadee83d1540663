"""
main.py — Graph Search Tracer Flask App
========================================
JSON API around the search engine.

Routes:
  GET  /api/algorithms         – registry cards (labels, pseudocode, …)
  POST /api/graph/generate     – generate a new graph
  POST /api/graph/import       – upload a graph as JSON
  GET  /api/graph/export       – download the current graph as JSON
  GET  /api/graph/metrics      – node / edge counts, density, avg degree
  POST /api/run                – run an algorithm, return its full trace
  GET  /api/report             – plain-text narration of the last run

State management:
  The Flask session holds:
    • graph      – serialised Graph
    • last_run   – {algorithm, start, end} of the most recent run
  Traces are NOT stored: they are returned by /api/run and, because every
  strategy is deterministic, /api/report simply re-runs the last
  configuration to rebuild the same trace.
"""

import logging

from flask import Flask, Response, jsonify, request, session

import config
from graph import Graph, generate_graph, calculate_metrics
from algorithms import list_algorithms
from engine import Recorder

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = config.SECRET_KEY


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_graph() -> Graph:
    """Deserialise graph from session, or generate the default one."""
    if "graph" not in session:
        session["graph"] = generate_graph().to_dict()
    return Graph.from_dict(session["graph"])


def save_graph(graph: Graph):
    session["graph"] = graph.to_dict()
    session.pop("last_run", None)


def graph_payload(graph: Graph) -> dict:
    metrics = calculate_metrics(graph)
    return {
        "graph":    graph.to_dict(),
        "metrics":  metrics.to_dict() if metrics else None,
        "node_ids": graph.node_ids(),
    }


def error(message: str, status: int = 400):
    return jsonify({"error": message}), status


def run_recorded(graph: Graph, algorithm: str, start: str, end: str) -> Recorder:
    rec = Recorder()
    rec.start(algorithm, start, end, graph)
    rec.run_to_completion()
    return rec


# ---------------------------------------------------------------------------
# API: Algorithms
# ---------------------------------------------------------------------------
@app.route("/api/algorithms", methods=["GET"])
def api_algorithms():
    return jsonify({"algorithms": [a.to_dict() for a in list_algorithms()]})


# ---------------------------------------------------------------------------
# API: Graph
# ---------------------------------------------------------------------------
@app.route("/api/graph/generate", methods=["POST"])
def api_graph_generate():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    try:
        g = generate_graph(
            num_nodes=int(data.get("num_nodes", config.DEFAULT_NUM_NODES)),
            density=float(data.get("density", config.DEFAULT_DENSITY)),
            kind=data.get("type", config.DEFAULT_GRAPH_TYPE),
            directed=bool(data.get("directed", False)),
            seed=data.get("seed"),
        )
    except (TypeError, ValueError) as e:
        return error(str(e))

    save_graph(g)
    return jsonify(graph_payload(g))


@app.route("/api/graph/import", methods=["POST"])
def api_graph_import():
    data = request.get_json(silent=True)
    if data is None:
        return error("request body must be JSON")
    try:
        g = Graph.from_dict(data)
    except (TypeError, ValueError) as e:
        logger.info(f"Rejected graph upload: {e}")
        return error(f"invalid graph JSON: {e}")

    save_graph(g)
    return jsonify(graph_payload(g))


@app.route("/api/graph/export", methods=["GET"])
def api_graph_export():
    return jsonify(get_graph().to_dict())


@app.route("/api/graph/metrics", methods=["GET"])
def api_graph_metrics():
    metrics = calculate_metrics(get_graph())
    return jsonify({"metrics": metrics.to_dict() if metrics else None})


# ---------------------------------------------------------------------------
# API: Run Algorithm
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    data      = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    graph     = get_graph()
    algorithm = data.get("algorithm", config.DEFAULT_ALGORITHM)
    start     = data.get("start")
    end       = data.get("end")

    # the engine trusts its inputs: endpoints are validated here
    if not isinstance(algorithm, str):
        return error("algorithm must be a string")
    if start is None or end is None or not graph.has_node(str(start)) or not graph.has_node(str(end)):
        return error("start or end node does not exist")
    start, end = str(start), str(end)

    rec = run_recorded(graph, algorithm, start, end)
    if len(rec.trace) == 0:
        return error(f"no steps generated for algorithm '{algorithm}'")

    session["last_run"] = {"algorithm": algorithm, "start": start, "end": end}
    return jsonify(rec.export())


@app.route("/api/report", methods=["GET"])
def api_report():
    last = session.get("last_run")
    if not last:
        return error("no run to report", 404)

    rec = run_recorded(get_graph(), last["algorithm"], last["start"], last["end"])
    return Response(rec.report(), mimetype="text/plain")


if __name__ == "__main__":
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)
