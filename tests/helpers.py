def assert_complete_grid(grid):
    """Every row, column and block must be a permutation of 1..N."""
    n = grid.shape[0]
    b = int(round(n ** 0.5))
    expected = list(range(1, n + 1))

    assert not (grid == 0).any()
    for i in range(n):
        assert sorted(grid[i, :].tolist()) == expected, f"row {i}"
        assert sorted(grid[:, i].tolist()) == expected, f"column {i}"
    for br in range(0, n, b):
        for bc in range(0, n, b):
            block = grid[br:br + b, bc:bc + b].ravel().tolist()
            assert sorted(block) == expected, f"block ({br}, {bc})"
