import pytest

try:
    import aws_cdk  # noqa: F401
except Exception:
    # CDK の jsii ランタイムが使えない環境ではインフラのテストを収集しない
    collect_ignore_glob = ["test_*.py"]


@pytest.fixture
def layer_source(tmp_path):
    """requirements.txt を持つレイヤーのソースディレクトリ"""
    source_path = tmp_path / "common_layer"
    source_path.mkdir()
    (source_path / "requirements.txt").write_text(
        "aws-lambda-powertools>=3.0.0\npydantic>=2.6\n"
    )
    return source_path


@pytest.fixture
def output_dir(tmp_path):
    path = tmp_path / "output"
    path.mkdir()
    return path
