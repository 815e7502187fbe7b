"""
Tests for the command-line interface.

Runs the CLI in-process through main() and checks exit codes, generated
files and user-facing messages.
"""


import pytest
import toml

from shell_bookmarks import __version__
from shell_bookmarks.cli import CLIInterface, main


class TestArgumentParsing:
    """Tests for argparse setup."""

    def test_short_options(self):
        args = CLIInterface().parse_args(
            ["-i", "bm", "-l", "lf", "-z", "zsh", "-c", "aliases"]
        )
        assert args.input == "bm"
        assert args.lf_file == "lf"
        assert args.zsh_file == "zsh"
        assert args.cd_alias_file == "aliases"

    def test_long_options(self):
        args = CLIInterface().parse_args(
            ["--input", "bm", "--lf", "lf", "--zsh", "zsh", "--cd-alias", "aliases"]
        )
        assert args.cd_alias_file == "aliases"
        assert not args.dry_run
        assert args.blank_lines is None

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])

        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_invalid_blank_lines_choice(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["--blank-lines", "sometimes"])
        assert exc_info.value.code == 2

    def test_validate_args(self, example_bookmarks_file, output_dir):
        cli = CLIInterface()
        args = cli.parse_args(
            ["-i", str(example_bookmarks_file), "-z", str(output_dir / "zsh")]
        )
        validated = cli.validate_args(args)

        assert validated["input_path"] == example_bookmarks_file
        assert validated["outputs"] == {"zsh": output_dir / "zsh"}
        assert validated["config_path"] is None


class TestRun:
    """End-to-end CLI runs."""

    def test_example_file(self, example_bookmarks_file, output_dir):
        lf_path = output_dir / "lf_bookmarks"
        zsh_path = output_dir / "named_dirs.zsh"

        exit_code = main(
            ["-i", str(example_bookmarks_file), "-l", str(lf_path), "-z", str(zsh_path)]
        )

        assert exit_code == 0
        assert lf_path.read_text() == (
            "map gproj cd /home/user/project\n"
            "map gdocs cd /home/user/My Documents\n"
        )
        assert zsh_path.read_text() == (
            "hash -d proj=/home/user/project\n"
            "hash -d docs=/home/user/My Documents\n"
        )
        assert not (output_dir / "cd_aliases.sh").exists()

    def test_cd_aliases(self, example_bookmarks_file, output_dir):
        path = output_dir / "cd_aliases.sh"
        assert main(["-i", str(example_bookmarks_file), "-c", str(path)]) == 0
        assert 'alias cddocs="/home/user/My Documents"\n' in path.read_text()

    def test_malformed_line_aborts(self, malformed_bookmarks_file, output_dir, capsys):
        """A malformed line exits non-zero and writes no output file."""
        outputs = [output_dir / "lf", output_dir / "zsh", output_dir / "aliases"]

        exit_code = main(
            [
                "-i", str(malformed_bookmarks_file),
                "-l", str(outputs[0]),
                "-z", str(outputs[1]),
                "-c", str(outputs[2]),
            ]
        )

        assert exit_code == 1
        assert not any(path.exists() for path in outputs)
        err = capsys.readouterr().err
        assert "onlyoneword" in err
        assert ":3:" in err

    def test_no_outputs_selected(self, example_bookmarks_file, capsys):
        exit_code = main(["-i", str(example_bookmarks_file)])

        assert exit_code == 1
        assert "At least one output file is required" in capsys.readouterr().err

    def test_no_input(self, output_dir, capsys):
        exit_code = main(["-l", str(output_dir / "lf")])

        assert exit_code == 1
        assert "Input file is required" in capsys.readouterr().err

    def test_missing_input_file(self, tmp_path, output_dir, capsys):
        exit_code = main(["-i", str(tmp_path / "missing"), "-l", str(output_dir / "lf")])

        assert exit_code == 1
        assert "Input file does not exist" in capsys.readouterr().err
        assert not (output_dir / "lf").exists()

    def test_same_output_twice(self, example_bookmarks_file, output_dir, capsys):
        path = str(output_dir / "same")
        exit_code = main(["-i", str(example_bookmarks_file), "-l", path, "-z", path])

        assert exit_code == 1
        assert "both write to" in capsys.readouterr().err

    def test_blank_lines_error_option(self, write_bookmarks_file, output_dir, capsys):
        path = write_bookmarks_file("a /1\n\nb /2\n")

        exit_code = main(
            ["-i", str(path), "-z", str(output_dir / "zsh"), "--blank-lines", "error"]
        )

        assert exit_code == 1
        assert "blank line" in capsys.readouterr().err

    def test_dry_run(self, example_bookmarks_file, output_dir, capsys):
        path = output_dir / "zsh"

        exit_code = main(["-i", str(example_bookmarks_file), "-z", str(path), "--dry-run"])

        assert exit_code == 0
        assert not path.exists()
        assert "hash -d docs=/home/user/My Documents" in capsys.readouterr().out

    def test_dry_run_creates_no_directories(self, example_bookmarks_file, output_dir):
        path = output_dir / "new" / "nested" / "lf"

        exit_code = main(["-i", str(example_bookmarks_file), "-l", str(path), "--dry-run"])

        assert exit_code == 0
        assert not (output_dir / "new").exists()

    def test_malformed_line_creates_no_directories(
        self, malformed_bookmarks_file, output_dir
    ):
        path = output_dir / "new" / "nested" / "lf"

        exit_code = main(["-i", str(malformed_bookmarks_file), "-l", str(path)])

        assert exit_code == 1
        assert not (output_dir / "new").exists()

    def test_missing_output_directory_created_on_write(
        self, example_bookmarks_file, output_dir
    ):
        path = output_dir / "new" / "nested" / "lf"

        assert main(["-i", str(example_bookmarks_file), "-l", str(path)]) == 0
        assert path.read_text().startswith("map gproj cd ")

    def test_verbose(self, example_bookmarks_file, output_dir, capsys):
        exit_code = main(
            ["-i", str(example_bookmarks_file), "-z", str(output_dir / "zsh"), "-v"]
        )

        assert exit_code == 0
        out = capsys.readouterr().out
        assert "Output (zsh)" in out
        assert "Bookmarks: 2" in out


class TestConfigFile:
    """CLI runs driven by a configuration file."""

    def test_outputs_from_config(self, example_bookmarks_file, output_dir, write_config_file):
        config_path = write_config_file(
            {
                "input": {"file": str(example_bookmarks_file)},
                "outputs": {"cd_alias_file": str(output_dir / "aliases.sh")},
            }
        )

        assert main(["--config", str(config_path)]) == 0
        assert (output_dir / "aliases.sh").read_text().startswith('alias cdproj="')

    def test_cli_adds_to_config_outputs(
        self, example_bookmarks_file, output_dir, write_config_file
    ):
        config_path = write_config_file(
            {"outputs": {"lf_file": str(output_dir / "lf")}}
        )

        exit_code = main(
            [
                "--config", str(config_path),
                "-i", str(example_bookmarks_file),
                "-z", str(output_dir / "zsh"),
            ]
        )

        assert exit_code == 0
        assert (output_dir / "lf").exists()
        assert (output_dir / "zsh").exists()

    def test_default_config_in_working_directory(
        self, isolated_environment, example_bookmarks_file, output_dir
    ):
        with open(isolated_environment / "shell_bookmarks.toml", "w") as f:
            toml.dump({"outputs": {"zsh_file": str(output_dir / "zsh")}}, f)

        assert main(["-i", str(example_bookmarks_file)]) == 0
        assert (output_dir / "zsh").exists()

    def test_invalid_config(self, write_config_file, capsys):
        config_path = write_config_file({"input": {"blank_lines": "never"}})

        assert main(["--config", str(config_path)]) == 1
        assert "Configuration Validation Failed" in capsys.readouterr().err

    def test_missing_config(self, tmp_path, capsys):
        assert main(["--config", str(tmp_path / "missing.toml")]) == 1
        assert "Configuration file does not exist" in capsys.readouterr().err


class TestCreateConfig:
    def test_creates_sample(self, tmp_path, capsys):
        path = tmp_path / "sample.toml"

        assert main(["--create-config", str(path)]) == 0
        assert "outputs" in toml.load(path)
        assert "Created configuration file" in capsys.readouterr().out

    def test_refuses_to_overwrite(self, tmp_path, capsys):
        path = tmp_path / "sample.toml"
        path.write_text("# mine\n")

        assert main(["--create-config", str(path)]) == 1
        assert path.read_text() == "# mine\n"
        assert "already exists" in capsys.readouterr().err
