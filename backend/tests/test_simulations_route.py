from fastapi.testclient import TestClient

from app.main import app

client = TestClient(app)


def test_health():
  r = client.get("/health")
  assert r.status_code == 200
  assert r.json()["status"] == "ok"


def test_list_simulations():
  r = client.get("/api/simulations")
  assert r.status_code == 200
  data = r.json()
  assert [s["id"] for s in data] == ["double-slit", "quantum-tunneling", "hydrogen-atom"]
  assert data[0]["estimated_time_minutes"] == 15
  assert "interference" in data[0]["topics"]


def test_get_simulation_details():
  r = client.get("/api/simulations/double-slit")
  assert r.status_code == 200
  data = r.json()
  wavelength = data["parameters"][0]
  assert wavelength["name"] == "wavelength"
  assert wavelength["min"] == 400.0 and wavelength["max"] == 700.0
  observer = data["parameters"][2]
  assert observer["param_type"] == "toggle"
  assert observer["default"] is False
  assert observer["min"] is None


def test_unknown_simulation_is_404():
  assert client.get("/api/simulations/unknown-id").status_code == 404
  r = client.post("/api/simulations/unknown-id/run", json={"parameters": {}})
  assert r.status_code == 404


def test_run_simulation_echoes_resolved_parameters():
  r = client.post(
    "/api/simulations/double-slit/run",
    json={"parameters": {"wavelength": 450, "observer_mode": "yes", "bogus": 1}},
  )
  assert r.status_code == 200
  body = r.json()
  assert body["simulation_id"] == "double-slit"
  assert body["data"]["wavelength"] == 450.0
  assert body["data"]["slit_separation"] == 0.1
  assert body["data"]["observer_mode"] is False
  assert "bogus" not in body["data"]
  assert len(body["data"]["pattern"]) == 200
  assert body["id"] and body["computed_at"]


def test_run_simulation_without_body():
  r = client.post("/api/simulations/quantum-tunneling/run")
  assert r.status_code == 200
  assert len(r.json()["data"]["transmission"]) == 200


def test_run_with_out_of_range_numbers_never_500():
  for params in (
    {"wavelength": 0},
    {"wavelength": 1e-300, "slit_separation": 1e300},
    {"wavelength": 10 ** 400},
  ):
    r = client.post("/api/simulations/double-slit/run", json={"parameters": params})
    assert r.status_code == 200
    assert len(r.json()["data"]["pattern"]) == 200


def test_huge_integer_in_raw_body_uses_default():
  body = '{"parameters": {"wavelength": 1' + "0" * 400 + "}}"
  r = client.post(
    "/api/simulations/double-slit/run",
    content=body,
    headers={"Content-Type": "application/json"},
  )
  assert r.status_code == 200
  assert r.json()["data"]["wavelength"] == 550.0
