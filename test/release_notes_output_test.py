import release_notes.output as examinee


def test_write_output_creates_parent_dirs(tmp_path):
    output_file = tmp_path / 'docs' / 'release-notes' / '1.2.0.md'

    examinee.write_output(str(output_file), 'Version: 1.2.0\n')

    assert output_file.read_text(encoding='utf-8') == 'Version: 1.2.0\n'


def test_write_output_overwrites(tmp_path):
    output_file = tmp_path / 'notes.md'
    output_file.write_text('a much longer, previous version of the release notes\n')

    examinee.write_output(str(output_file), 'Tickets: A-1 – Ä\n')

    assert output_file.read_text(encoding='utf-8') == 'Tickets: A-1 – Ä\n'


def test_write_output_to_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    examinee.write_output('notes.md', 'notes')

    assert (tmp_path / 'notes.md').read_text() == 'notes'
