"""
Tests for the interactive .env generator.
"""

from contactform import setup_env


def answers(*values):
    it = iter(values)
    return lambda prompt: next(it)


def test_writes_env_file_with_defaults(tmp_path):
    path = tmp_path / ".env"

    # mongo, host, port, secure, user, password, contact email
    code = setup_env.main(["--path", str(path)], answers("", "", "", "", "me@example.com", "pw", ""))

    assert code == 0
    content = path.read_text(encoding="utf-8")
    assert "MONGODB_URI=mongodb://localhost:27017/cove-childcare" in content
    assert "EMAIL_HOST=smtp.gmail.com" in content
    assert "EMAIL_PORT=587" in content
    assert "EMAIL_SECURE=false" in content
    assert "EMAIL_USER=me@example.com" in content
    assert "EMAIL_PASS=pw" in content
    assert "CONTACT_EMAIL=Contract@covechildcare.co.uk" in content


def test_custom_answers(tmp_path):
    path = tmp_path / ".env"

    setup_env.main(["--path", str(path)], answers(
        "mongodb://db/site", "smtp.example.com", "465", "true", "me@example.com", "pw", "inbox@example.com",
    ))

    content = path.read_text(encoding="utf-8")
    assert "MONGODB_URI=mongodb://db/site" in content
    assert "EMAIL_SECURE=true" in content
    assert "CONTACT_EMAIL=inbox@example.com" in content


def test_existing_file_kept_when_declined(tmp_path):
    path = tmp_path / ".env"
    path.write_text("PORT=1234\n", encoding="utf-8")

    code = setup_env.main(["--path", str(path)], answers("n"))

    assert code == 0
    assert path.read_text(encoding="utf-8") == "PORT=1234\n"


def test_existing_file_overwritten_when_confirmed(tmp_path):
    path = tmp_path / ".env"
    path.write_text("PORT=1234\n", encoding="utf-8")

    code = setup_env.main(["--path", str(path)], answers("y", "", "", "", "", "me@example.com", "pw", ""))

    assert code == 0
    assert "EMAIL_USER=me@example.com" in path.read_text(encoding="utf-8")


def test_missing_user_aborts(tmp_path):
    path = tmp_path / ".env"

    code = setup_env.main(["--path", str(path)], answers("", "", "", "", ""))

    assert code == 1
    assert not path.exists()


def test_missing_password_aborts(tmp_path):
    path = tmp_path / ".env"

    code = setup_env.main(["--path", str(path)], answers("", "", "", "", "me@example.com", ""))

    assert code == 1
    assert not path.exists()
