"""Sample handler packages used by the discovery tests."""
