def test_equipment_defaults_and_filters(client):
    resp = client.post("/api/equipment", json={"name": "Crane #1", "make": "Liebherr", "model": "LTM 1050"})
    assert resp.status_code == 201
    eq = resp.get_json()["data"]
    assert eq["id"] == "EQ001"
    assert eq["type"] == "equipment"
    assert eq["maintenance"] == "current"
    assert eq["lastMaintenance"] is not None
    assert eq["nextMaintenance"] is not None

    client.post("/api/equipment", json={"name": "Lift", "make": "JLG", "model": "600S", "maintenance": "due"})
    due = client.get("/api/equipment?maintenance=due").get_json()["data"]
    assert [e["name"] for e in due] == ["Lift"]

    resp = client.post("/api/equipment", json={"name": "X", "make": "Y", "model": "Z", "availability": "broken"})
    assert resp.status_code == 422


def test_equipment_delete_clears_resource_master(client, app):
    from smartres_api.extensions import db
    from smartres_api.models.equipment import Equipment

    eq = client.post(
        "/api/equipment",
        json={"name": "Crane", "make": "Tadano", "model": "GR", "resourceMasterId": "RES001"},
    ).get_json()["data"]
    assert client.delete(f"/api/equipment/{eq['id']}").status_code == 200

    stored = db.session.get(Equipment, eq["id"])
    assert stored.is_deleted is True
    assert stored.resource_master_id is None


def test_project_create_update_and_date_checks(client):
    body = {
        "name": "Boiler Retrofit",
        "startDate": "2024-01-01",
        "endDate": "2024-03-31",
        "resourceRequirements": [{"resourceMasterId": "RES001", "quantity": 2, "startDate": "2024-01-05"}],
    }
    resp = client.post("/api/projects", json=body)
    assert resp.status_code == 201
    p = resp.get_json()["data"]
    assert p["id"] == "PROJ001"
    assert p["status"] == "planning"
    assert p["priority"] == "medium"
    assert p["assignedResources"] == []
    assert p["resourceRequirements"] == [
        {"resourceMasterId": "RES001", "quantity": 2, "startDate": "2024-01-05", "endDate": None}
    ]

    bad = dict(body, endDate="2023-12-01")
    assert client.post("/api/projects", json=bad).status_code == 422

    # end before the stored start
    resp = client.put(f"/api/projects/{p['id']}", json={"endDate": "2023-06-01"})
    assert resp.status_code == 422

    resp = client.put(f"/api/projects/{p['id']}", json={"status": "active", "progress": 10})
    assert resp.status_code == 200
    assert resp.get_json()["data"]["status"] == "active"
    assert [x["id"] for x in client.get("/api/projects?status=active").get_json()["data"]] == ["PROJ001"]


def test_business_center_type_is_writable(client):
    resp = client.post("/api/business-centers", json={"name": "North Shop", "type": "workshop", "capacity": 40})
    assert resp.status_code == 201
    bc = resp.get_json()["data"]
    assert bc["id"] == "BC001"
    assert bc["type"] == "workshop"

    resp = client.put(f"/api/business-centers/{bc['id']}", json={"type": "yard", "currentOccupancy": 12})
    assert resp.get_json()["data"]["type"] == "yard"
    assert resp.get_json()["data"]["currentOccupancy"] == 12


def test_resource_group_member_count_tracks_members(client):
    resp = client.post(
        "/api/resource-groups",
        json={"name": "Night Welders", "groupType": "welders", "memberIds": ["EMP001", "EMP002"], "memberCount": 99},
    )
    assert resp.status_code == 201
    rg = resp.get_json()["data"]
    assert rg["id"] == "RG001"
    assert rg["memberCount"] == 2

    resp = client.put(f"/api/resource-groups/{rg['id']}", json={"memberIds": ["EMP003"]})
    assert resp.get_json()["data"]["memberCount"] == 1

    client.post("/api/resource-groups", json={"name": "Sparks", "groupType": "electricians"})
    listed = client.get("/api/resource-groups?groupType=electricians").get_json()["data"]
    assert [g["name"] for g in listed] == ["Sparks"]


def test_resource_master_keyed_by_resource_id(client):
    resp = client.post("/api/resource-masters", json={"resourceName": "Senior Welder", "resourceType": "manpower"})
    assert resp.status_code == 201
    rm = resp.get_json()["data"]
    assert rm["resourceId"] == "RES001"

    assert client.get("/api/resource-masters/RES001").get_json()["data"]["resourceName"] == "Senior Welder"
    resp = client.put("/api/resource-masters/RES001", json={"resourceId": "RES777", "description": "Certified"})
    assert resp.get_json()["data"]["resourceId"] == "RES001"
    assert resp.get_json()["data"]["description"] == "Certified"

    resp = client.delete("/api/resource-masters/RES001")
    assert resp.get_json()["data"]["isDeleted"] is True
    assert client.get("/api/resource-masters/RES001").status_code == 404

    assert client.post("/api/resource-masters", json={"resourceName": "X", "resourceType": "vehicle"}).status_code == 422
