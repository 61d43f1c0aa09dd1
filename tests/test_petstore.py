import yaml

from gnostic.petstore import build_document_v2, build_document_v3, main


def test_v2_header_fields():
    d = build_document_v2()
    assert d["swagger"] == "2.0"
    assert d["info"] == {
        "title": "Swagger Petstore",
        "version": "1.0.0",
        "license": {"name": "MIT"},
    }
    assert d["host"] == "petstore.swagger.io"
    assert d["basePath"] == "/v1"
    assert d["schemes"] == ["http"]
    assert d["consumes"] == ["application/json"]
    assert d["produces"] == ["application/json"]


def test_v2_paths_and_operations():
    d = build_document_v2()
    assert list(d["paths"]) == ["/pets", "/pets/{petId}"]
    get = d["paths"]["/pets"]["get"]
    assert get["operationId"] == "listPets"
    assert get["tags"] == ["pets"]
    assert get["parameters"] == [
        {
            "name": "limit",
            "in": "query",
            "description": "How many items to return at one time (max 100)",
            "type": "integer",
            "format": "int32",
        }
    ]
    ok = get["responses"]["200"]
    assert ok["description"] == "An paged array of pets"
    assert ok["schema"] == {"$ref": "#/definitions/Pets"}
    assert ok["headers"]["x-next"]["type"] == "string"
    post = d["paths"]["/pets"]["post"]
    assert post["operationId"] == "createPets"
    assert "parameters" not in post
    assert post["responses"]["201"] == {"description": "Null response"}
    assert post["responses"]["default"]["schema"] == {"$ref": "#/definitions/Error"}
    show = d["paths"]["/pets/{petId}"]["get"]
    assert show["operationId"] == "showPetById"
    assert show["parameters"][0]["required"] is True
    assert show["parameters"][0]["in"] == "path"


def test_v2_definitions():
    defs = build_document_v2()["definitions"]
    assert list(defs) == ["Pet", "Pets", "Error"]
    assert defs["Pet"]["required"] == ["id", "name"]
    assert defs["Pet"]["properties"]["id"] == {"type": "integer", "format": "int64"}
    assert defs["Pets"] == {"type": "array", "items": {"$ref": "#/definitions/Pet"}}
    assert defs["Error"]["properties"]["code"] == {"type": "integer", "format": "int32"}


def test_v3_document():
    d = build_document_v3()
    assert d["openapi"] == "3.0"
    assert d["info"]["title"] == "OpenAPI Petstore"
    assert d["servers"] == [
        {"url": "https://petstore.openapis.org/v1", "description": "Development server"}
    ]
    get = d["paths"]["/pets"]["get"]
    assert list(get["responses"]) == ["default", "200"]
    assert get["responses"]["200"]["content"]["application/json"]["schema"] == {
        "$ref": "#/components/schemas/Pets"
    }
    assert get["responses"]["200"]["headers"]["x-next"]["schema"] == {"type": "string"}
    assert get["parameters"][0]["schema"] == {"type": "integer", "format": "int32"}
    assert "required" not in get["parameters"][0]
    assert "parameters" not in d["paths"]["/pets"]["post"]
    schemas = d["components"]["schemas"]
    assert list(schemas) == ["Pet", "Pets", "Error"]
    assert schemas["Pets"]["items"] == {"$ref": "#/components/schemas/Pet"}


def test_builders_return_fresh_documents():
    a = build_document_v2()
    a["paths"]["/pets"]["get"]["operationId"] = "changed"
    assert build_document_v2()["paths"]["/pets"]["get"]["operationId"] == "listPets"


def test_main_defaults_to_v2(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 0
    assert (tmp_path / "petstore-v2.yaml").exists()
    assert not (tmp_path / "petstore-v3.yaml").exists()
    loaded = yaml.safe_load((tmp_path / "petstore-v2.yaml").read_text())
    assert loaded == build_document_v2()


def test_main_writes_both(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["--v2", "--v3"]) == 0
    v2 = yaml.safe_load((tmp_path / "petstore-v2.yaml").read_text())
    v3 = yaml.safe_load((tmp_path / "petstore-v3.yaml").read_text())
    assert v2 == build_document_v2()
    assert v3 == build_document_v3()


def test_main_v3_only(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["--v3"]) == 0
    assert sorted(p.name for p in tmp_path.iterdir()) == ["petstore-v3.yaml"]


def test_main_unknown_option(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["--bogus"]) == 255
    out = capsys.readouterr().out
    assert "Unknown option: --bogus." in out
    assert "--v2" in out
    assert list(tmp_path.iterdir()) == []