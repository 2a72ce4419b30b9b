from scripts import import_exercises
from tests.test_data import BARBELL_CURL_ROW, HEADER


class FakeExerciseRepo:
    def __init__(self, existing: int = 4):
        self.existing = existing
        self.calls: list[str] = []
        self.imported = None

    def clear_all(self) -> int:
        self.calls.append("clear_all")
        return self.existing

    def import_catalog(self, catalog) -> int:
        self.calls.append("import_catalog")
        self.imported = catalog
        return len(catalog)


def test_import_clears_then_imports(fake_source, capsys):
    repo = FakeExerciseRepo()

    count = import_exercises.import_exercises(repo, fake_source())

    assert count == 3
    assert repo.calls == ["clear_all", "import_catalog"]
    out = capsys.readouterr().out
    assert "Cleared 4 existing exercises" in out
    assert "Imported 3 exercises" in out


def test_import_can_keep_existing(fake_source):
    repo = FakeExerciseRepo()

    import_exercises.import_exercises(repo, fake_source(), clear_existing=False)

    assert repo.calls == ["import_catalog"]


def test_import_reports_collisions(fake_source, capsys):
    twin = BARBELL_CURL_ROW.replace("Barbell Curl,", "Barbell Curl!,", 1)
    source = fake_source(text="\n".join([HEADER, BARBELL_CURL_ROW, twin]))

    import_exercises.import_exercises(FakeExerciseRepo(), source)

    assert "biceps-barbell-curl" in capsys.readouterr().out


def test_main_passes_keep_existing_flag(monkeypatch, fake_source):
    repo = FakeExerciseRepo()
    monkeypatch.setattr(import_exercises, "DynamoExerciseRepository", lambda: repo)
    monkeypatch.setattr(import_exercises, "get_dataset_source", lambda: fake_source())

    import_exercises.main(["--keep-existing"])

    assert repo.calls == ["import_catalog"]
