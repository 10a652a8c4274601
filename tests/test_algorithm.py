import pytest

from httpmsgsig.signing.algorithm import (
    Algorithm,
    AlgorithmError,
    get_algorithm,
    register_algorithm,
    supported_algorithms,
    unregister_algorithm,
)


class MockAlgorithm(Algorithm):
    def __init__(self, algorithm_id):
        self.id = algorithm_id

    def sign(self, signature_base, key):
        return b"mock-signature"

    def verify(self, signature_base, signature, key):
        return None


@pytest.fixture
def mock_algorithm():
    algorithm = MockAlgorithm("test-mock-algorithm")
    register_algorithm(algorithm)
    yield algorithm
    unregister_algorithm(algorithm.id)


def test_get_algorithm_empty_id():
    with pytest.raises(AlgorithmError, match="cannot be empty"):
        get_algorithm("")


@pytest.mark.parametrize(
    "algorithm_id",
    ["unknown-algorithm", "RSA-PSS-SHA512", "rsa-pss-sha51", "---"],
)
def test_get_algorithm_unsupported(algorithm_id):
    with pytest.raises(AlgorithmError, match="unsupported algorithm"):
        get_algorithm(algorithm_id)


def test_get_algorithm_returns_registered_instance(mock_algorithm):
    found = get_algorithm("test-mock-algorithm")
    assert found is mock_algorithm
    assert found.sign(b"base", None) == b"mock-signature"


def test_supported_algorithms_contains_registered(mock_algorithm):
    algorithms = supported_algorithms()
    assert "test-mock-algorithm" in algorithms
    assert algorithms == sorted(algorithms)


def test_register_duplicate_raises():
    algorithm = MockAlgorithm("test-duplicate-algorithm")
    register_algorithm(algorithm)
    try:
        with pytest.raises(AlgorithmError, match="already registered"):
            register_algorithm(algorithm)
    finally:
        unregister_algorithm("test-duplicate-algorithm")
    assert "test-duplicate-algorithm" not in supported_algorithms()


def test_register_empty_id_raises():
    with pytest.raises(AlgorithmError, match="cannot be empty"):
        register_algorithm(MockAlgorithm(""))


def test_unregister_removes_algorithm():
    register_algorithm(MockAlgorithm("test-removable-algorithm"))
    unregister_algorithm("test-removable-algorithm")
    with pytest.raises(AlgorithmError, match="unsupported algorithm"):
        get_algorithm("test-removable-algorithm")


def test_unregister_unknown_raises():
    with pytest.raises(AlgorithmError, match="unsupported algorithm"):
        unregister_algorithm("never-registered-algorithm")


def test_algorithm_requires_sign_and_verify():
    class Incomplete(Algorithm):
        id = "incomplete"

    with pytest.raises(TypeError):
        register_algorithm(Incomplete())
    with pytest.raises(AlgorithmError, match="unsupported algorithm"):
        get_algorithm("incomplete")