from fastapi.testclient import TestClient

from api import create_app
from project_context.qa import PayloadAnswerer
from project_context.state import ContextStore


class EchoAnswerer:
	def __init__(self):
		self.calls = []

	def ask(self, query, context):
		self.calls.append((query, context))
		return f"{query} -> {', '.join(context.main_technologies)}"


def test_analyze_returns_camel_case_context(make_repo):
	root = make_repo({"package.json": '{"dependencies": {"react": "18"}}', "src/App.tsx": ""})
	store = ContextStore()
	client = TestClient(create_app(store=store))
	resp = client.post("/analyze", json={"root_path": str(root)})
	assert resp.status_code == 200
	data = resp.json()
	assert data["mainTechnologies"] == ["React", "TypeScript"]
	assert data["packageDetails"]["mainDependencies"] == ["react"]
	assert store.get(str(root)) is not None

	stored = client.get("/context", params={"root_path": str(root)})
	assert stored.status_code == 200
	assert stored.json() == data


def test_analyze_invalid_root(tmp_path):
	client = TestClient(create_app())
	resp = client.post("/analyze", json={"root_path": str(tmp_path / "missing")})
	assert resp.status_code == 400


def test_context_not_found(tmp_path):
	client = TestClient(create_app())
	assert client.get("/context", params={"root_path": str(tmp_path)}).status_code == 404


def test_tree_endpoint(make_repo):
	root = make_repo({"src/a.ts": "", "src/b.json": "{}"})
	resp = TestClient(create_app()).post("/tree", json={"root_path": str(root)})
	assert resp.status_code == 200
	body = resp.json()
	assert body["text"] == "+ src/\n  - a.ts (.ts)\n"
	assert body["tree"]["children"]["src"]["kind"] == "directory"


def test_ask_flow(make_repo):
	root = make_repo({"src/App.tsx": ""})
	answerer = EchoAnswerer()
	client = TestClient(create_app(answerer=answerer))

	assert client.post("/ask", json={"root_path": str(root), "query": "What?"}).status_code == 404
	client.post("/analyze", json={"root_path": str(root)})
	resp = client.post("/ask", json={"root_path": str(root), "query": "What?"})
	assert resp.status_code == 200
	assert resp.json() == {"answer": "What? -> TypeScript, React"}
	assert client.post("/ask", json={"root_path": str(root), "query": " "}).status_code == 400


def test_ask_without_answerer(tmp_path):
	client = TestClient(create_app())
	resp = client.post("/ask", json={"root_path": str(tmp_path), "query": "What?"})
	assert resp.status_code == 503


def test_ask_through_payload_answerer(make_repo):
	root = make_repo({"src/App.tsx": ""})
	sent = []

	def send(payload):
		sent.append(payload)
		return "answered"

	client = TestClient(create_app(answerer=PayloadAnswerer(send)))
	client.post("/analyze", json={"root_path": str(root)})
	resp = client.post("/ask", json={"root_path": str(root), "query": "Where is routing?"})
	assert resp.json() == {"answer": "answered"}
	(payload,) = sent
	assert payload["query"] == "Where is routing?"
	assert payload["response_mode"] == "blocking"
	assert '"mainTechnologies":["TypeScript","React"]' in payload["inputs"]["project_context"]
