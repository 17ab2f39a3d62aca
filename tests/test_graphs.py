from algokit.graphs import network_delay_time


def test_network_delay_example():
    assert network_delay_time([[2, 1, 1], [2, 3, 1], [3, 4, 1]], 4, 2) == 2


def test_network_delay_unreachable():
    assert network_delay_time([[1, 2, 1]], 2, 2) == -1


def test_network_delay_single_node():
    assert network_delay_time([], 1, 1) == 0


def test_network_delay_chain_sums_weights():
    times = [[1, 2, 3], [2, 3, 4], [3, 4, 5]]
    assert network_delay_time(times, 4, 1) == sum(w for _, _, w in times)


def test_network_delay_prefers_shorter_indirect_route():
    direct = 10
    times = [[1, 2, direct], [1, 3, 1], [3, 2, 1]]
    result = network_delay_time(times, 3, 1)
    assert result < direct
    assert result == 2


def test_network_delay_isolated_node_fails():
    times = [[1, 2, 1], [2, 1, 1]]
    assert network_delay_time(times, 3, 1) == -1