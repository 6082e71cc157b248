import json

import pytest

from mindscape.http.transport import HttpTransport, TransportResponse


class FakeTransport(HttpTransport):
    """Replays canned responses (or raises canned exceptions) in order."""

    def __init__(self, responses):
        self.responses = list(responses)
        self.requests = []

    async def send(self, request):
        self.requests.append(request)
        item = self.responses.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


class SleepRecorder:
    """Stand-in for asyncio.sleep that records the requested delays."""

    def __init__(self):
        self.delays = []

    async def __call__(self, delay):
        self.delays.append(delay)


@pytest.fixture
def palace_payload():
    """Response body of a successful upload."""
    return {
        "title": "Photosynthesis",
        "environment_theme": {
            "theme": "greenhouse",
            "description": "A glass house full of plants",
            "rationale": "Biology content",
            "confidence": 0.87
        },
        "environment_config": {
            "theme": "greenhouse",
            "theme_name": "Victorian Greenhouse",
            "floor_texture": "https://cdn.example.com/floor.png",
            "skybox": "https://cdn.example.com/sky.png",
            "objects": [
                {
                    "type": "box",
                    "name": "Potting bench",
                    "position": [1.0, 0.0, -2.0],
                    "rotation": [0.0, 1.57, 0.0],
                    "size": [2.0, 1.0, 0.5],
                    "texture_url": "https://cdn.example.com/wood.png"
                },
                {
                    "type": "cylinder",
                    "name": "Column",
                    "position": [3.0, 0.0, 3.0],
                    "rotation": [0.0, 0.0, 0.0],
                    "radius": 0.3
                },
                {
                    "type": "sphere",
                    "position": [0.0, 4.0, 0.0],
                    "rotation": [0.0, 0.0, 0.0],
                    "radius": 1.2
                }
            ]
        },
        "concepts": [
            {
                "id": "light-reactions",
                "name": "Light Reactions",
                "description": "Light energy is converted into chemical energy.",
                "mnemonic_prompt": "A sun charging a battery",
                "audio_script": "Picture the sun plugging into a battery...",
                "key_facts": ["Occur in thylakoids", "Produce ATP and NADPH"],
                "connections": ["calvin-cycle"],
                "image_url": "https://cdn.example.com/light.png",
                "position": [0.0, 1.5, -4.0]
            },
            {
                "id": "calvin-cycle",
                "name": "Calvin Cycle",
                "description": "CO2 is fixed into sugar.",
                "mnemonic_prompt": "A carousel of carbon",
                "audio_script": "The carousel turns...",
                "key_facts": ["Occurs in the stroma"],
                "connections": ["light-reactions"]
            }
        ],
        "learning_path": ["light-reactions", "calvin-cycle"],
        "music_session_id": "music-42"
    }


@pytest.fixture
def palace_json(palace_payload):
    return json.dumps(palace_payload).encode("utf-8")


@pytest.fixture
def ok_response(palace_json):
    return TransportResponse(status_code=200, body=palace_json)


@pytest.fixture
def make_transport():
    """Factory: make_transport([response_or_exception, ...])."""
    return FakeTransport


@pytest.fixture
def sleeper():
    return SleepRecorder()
