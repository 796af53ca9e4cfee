import pytest

from thinfilmcalc.exceptions import BlankNameError, FileOpenError, InvalidIndexError
from thinfilmcalc.model.io import IOManager
from thinfilmcalc.model.library import MaterialLibrary
from thinfilmcalc.model.materials import Material


def _write_library(path, count):
    materials = [Material(f"Film {i}", 1.0 + i / 10) for i in range(count)]
    IOManager.save_library(materials, str(path))
    return materials


class TestLoad:

    def test_load(self, library):
        assert len(library) == 3
        assert library.names() == ["SiO2", "Si3N4", "Ta2O5"]
        assert [m.refractive_index for m in library] == [1.46, 2.01, 2.1]

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileOpenError):
            MaterialLibrary.load(str(tmp_path / "missing.txt"))

    def test_save_rewrites_file(self, library, library_file):
        library.materials.reverse()
        library.save()
        assert library_file.read_text(encoding="utf-8") == "Ta2O5\n2.1\nSi3N4\n2.01\nSiO2\n1.46\n"


class TestPositions:

    @pytest.mark.parametrize("position, index", [(1, 0), (2, 1), (3, 2)])
    def test_index_of(self, library, position, index):
        assert library.index_of(position) == index

    @pytest.mark.parametrize("position", [0, -1, 4, 100])
    def test_index_of_out_of_range(self, library, position):
        with pytest.raises(InvalidIndexError) as excinfo:
            library.index_of(position)
        assert excinfo.value.position == position
        assert excinfo.value.size == 3

    def test_invalid_index_error_is_an_index_error(self, library):
        with pytest.raises(IndexError):
            library.index_of(9)

    def test_get_returns_copy(self, library):
        film = library.get(1)
        film.spectral_range = 300.0
        film.fringe_count = 4.0
        film.refractive_index = 9.9
        assert library.materials[0] == Material("SiO2", 1.46)

    def test_empty_library_message(self, tmp_path):
        empty = MaterialLibrary(str(tmp_path / "films.txt"))
        with pytest.raises(InvalidIndexError, match="empty"):
            empty.index_of(1)


class TestDelete:

    def test_delete_middle(self, library, library_file):
        removed = library.delete_at(library.index_of(2))
        assert removed == Material("Si3N4", 2.01)
        assert library.names() == ["SiO2", "Ta2O5"]
        assert library_file.read_text(encoding="utf-8") == "SiO2\n1.46\nTa2O5\n2.1\n"

    def test_delete_last_is_truncation(self, library):
        before = list(library)
        library.delete_at(2)
        assert list(library) == before[:2]

    @pytest.mark.parametrize("index", [-1, 3, 10])
    def test_delete_out_of_range_leaves_file_untouched(self, library, library_file, index):
        before = library_file.read_bytes()
        with pytest.raises(InvalidIndexError):
            library.delete_at(index)
        assert len(library) == 3
        assert library_file.read_bytes() == before

    @pytest.mark.parametrize("count", [1, 2, 5])
    def test_delete_every_position(self, tmp_path, count):
        path = tmp_path / "films.txt"
        for i in range(count):
            materials = _write_library(path, count)
            library = MaterialLibrary.load(str(path))
            library.delete_at(i)
            assert len(library) == count - 1
            assert list(library)[:i] == materials[:i]
            assert list(library)[i:] == materials[i + 1:]
            assert MaterialLibrary.load(str(path)).materials == library.materials


class TestAdd:

    def test_add_updates_memory_and_file(self, library, library_file):
        library.add(Material("MgF2", 1.38))
        assert library.names()[-1] == "MgF2"
        assert MaterialLibrary.load(str(library_file)).names() == library.names()

    def test_add_keeps_name_and_index_only(self, library):
        library.add(Material("Glass", 1.5, 300.0, 4.0))
        assert library.materials[-1] == Material("Glass", 1.5)

    def test_add_and_save(self, library, library_file):
        library.add_and_save(Material("Glass", 1.5, 300.0, 4.0))
        assert library.materials[-1] == Material("Glass", 1.5)
        assert library_file.read_text(encoding="utf-8").endswith("Ta2O5\n2.1\nGlass\n1.5\n")

    def test_added_entry_is_not_the_caller_object(self, library):
        film = Material("Glass", 1.5)
        library.add(film)
        film.refractive_index = 2.5
        assert library.materials[-1].refractive_index == 1.5

    def test_add_after_unterminated_last_line(self, tmp_path):
        path = tmp_path / "films.txt"
        path.write_text("SiO2\n1.46\nSi3N4\n2.01", encoding="utf-8")
        library = MaterialLibrary.load(str(path))
        library.add(Material("MgF2", 1.38))
        assert MaterialLibrary.load(str(path)).materials == library.materials
        assert library.names() == ["SiO2", "Si3N4", "MgF2"]

    @pytest.mark.parametrize("add", ["add", "add_and_save"])
    def test_blank_name_changes_nothing(self, library, library_file, add):
        before = library_file.read_bytes()
        with pytest.raises(BlankNameError):
            getattr(library, add)(Material("", 1.5))
        assert len(library) == 3
        assert library_file.read_bytes() == before
