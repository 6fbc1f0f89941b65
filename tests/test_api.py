from fastapi.testclient import TestClient

from assignmate.api.deps import get_generation_service, get_humanizer
from assignmate.main import app
from assignmate.services.humanizer import HumanizerService
from conftest import ConstantRandom, FakeGenerator

SAMPLE = " ".join(
    ["I think school should start later because students are tired, and that matters a lot."] * 20
)


def test_generate_rejects_empty_sample(client):
    response = client.post("/api/generate", json={"writingSample": "", "assignmentPrompt": "Write an essay"})

    assert response.status_code == 400
    assert response.json()["error"]


def test_generate_rejects_missing_prompt(client):
    response = client.post("/api/generate", json={"writingSample": SAMPLE})

    assert response.status_code == 400
    assert response.json() == {"error": "Writing sample and assignment prompt are required"}


def test_generate_rejects_invalid_json(client):
    response = client.post(
        "/api/generate",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid JSON body"}


def test_generate_rejects_non_utf8_body(client):
    response = client.post(
        "/api/generate",
        content=b'{"writingSample": "\xff\xfe", "assignmentPrompt": "Write"}',
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid JSON body"}


def test_generate_rejects_wrong_types(client):
    response = client.post("/api/generate", json={"writingSample": ["a"], "assignmentPrompt": "Write"})

    assert response.status_code == 400
    assert "writingSample" in response.json()["error"]


def test_generate_success(client, fake_generator):
    response = client.post(
        "/api/generate",
        json={
            "writingSample": SAMPLE,
            "assignmentPrompt": "Analyze the causes of X in 500 words",
            "materials": 'Term: definition. 42%. "a quote"',
        },
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["text"]
    assert payload["text"] == payload["generatedText"] == "Generated essay text."

    prompt = fake_generator.prompts[0]
    assert "ASSIGNMENT: Analyze the causes of X in 500 words" in prompt
    assert 'COURSE MATERIALS TO REFERENCE: Term: definition. 42%. "a quote"' in prompt
    assert "DO NOT COPY THIS CONTENT" in prompt


def test_generate_without_materials_uses_general_knowledge(client, fake_generator):
    response = client.post("/api/generate", json={"writingSample": SAMPLE, "assignmentPrompt": "Write"})

    assert response.status_code == 200
    assert "Use general knowledge on the topic" in fake_generator.prompts[0]


def test_generate_applies_humanizer(fake_generator):
    fake_generator.text = "It is key. Then we go, and stay."
    app.dependency_overrides[get_generation_service] = lambda: fake_generator
    app.dependency_overrides[get_humanizer] = lambda: HumanizerService(rng=ConstantRandom(0.0))
    try:
        response = TestClient(app).post("/api/generate", json={"writingSample": SAMPLE, "assignmentPrompt": "Write"})
    finally:
        app.dependency_overrides.clear()

    assert response.json()["text"] == "It seems to is really key and i think Well; Then we go; and stay."


def test_generate_backend_failure(client):
    app.dependency_overrides[get_generation_service] = lambda: FakeGenerator(error="Model is currently loading")

    response = client.post("/api/generate", json={"writingSample": SAMPLE, "assignmentPrompt": "Write"})

    assert response.status_code == 500
    assert response.json() == {"error": "Model is currently loading"}


def test_generate_empty_backend_output(client):
    app.dependency_overrides[get_generation_service] = lambda: FakeGenerator(text="")

    response = client.post("/api/generate", json={"writingSample": SAMPLE, "assignmentPrompt": "Write"})

    assert response.status_code == 500
    assert response.json()["error"]


def test_analyze_returns_profiles(client, fake_generator):
    response = client.post(
        "/api/analyze",
        json={
            "writingSample": SAMPLE,
            "assignmentPrompt": "Analyze and compare the two policies",
            "materials": "This syllabus covers chapter 3.",
        },
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["style"]["sentence_structure"]["avg"] == 15
    assert payload["materials"]["material_type"] == "syllabus"
    assert payload["prompt"]["assignment_type"] == "analytical"
    assert payload["prompt"]["instruction_verbs"] == ["analyze", "compare"]
    assert fake_generator.prompts == []


def test_analyze_without_prompt(client):
    response = client.post("/api/analyze", json={"writingSample": "no sentences here"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["style"] == {"avg_sentence_length": 0}
    assert payload["materials"]["word_count"] == 0
    assert payload["prompt"] is None


def test_analyze_requires_sample(client):
    response = client.post("/api/analyze", json={"assignmentPrompt": "Write"})

    assert response.status_code == 400


def test_healthz_and_trace_header(client):
    response = client.get("/healthz", headers={"x-trace-id": "abc123"})

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert response.headers["x-trace-id"] == "abc123"


class _BrokenGenerator:
    async def generate(self, prompt: str) -> str:
        raise KeyError("generated_text")


def test_unexpected_error_keeps_trace_header():
    app.dependency_overrides[get_generation_service] = lambda: _BrokenGenerator()
    app.dependency_overrides[get_humanizer] = lambda: HumanizerService(rng=ConstantRandom(0.99))
    try:
        response = TestClient(app, raise_server_exceptions=False).post(
            "/api/generate",
            json={"writingSample": SAMPLE, "assignmentPrompt": "Write"},
            headers={"x-trace-id": "t1"},
        )
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
    assert response.headers["x-trace-id"] == "t1"


def test_error_responses_carry_generated_trace_id(client):
    response = client.post("/api/generate", json={"writingSample": ""})

    assert response.status_code == 400
    assert len(response.headers["x-trace-id"]) == 32
