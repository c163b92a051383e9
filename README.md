# labtools

Small numerical experiments in plain Python, with no dependencies beyond the
standard library:

- `labtools.scrambler`: shuffles a sequence of `n` +1 steps and `n` -1 steps
  and counts how many shuffles keep every proper prefix sum non-positive, and
  how many keep every proper prefix sum non-negative.
- `labtools.valley`: shuffles a sequence of `n` +1 steps and `n + 1` -1 steps,
  drops the step at the lowest point of its running sum and puts the part after
  it first, then measures how often the result has prefix sums of one sign.
- `labtools.balanced`: the same drop-and-rotate construction (`reorder`),
  printing each shuffled sequence next to its reordered form.
- `labtools.cosine`: reads 2-D vectors from a text file and lists the cosine
  between every pair, smallest first.
- `labtools.matrix`: builds counting matrices and multiplies square matrices.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Commands

```
labtools-scrambler [RUNS] [VECTOR_SIZE] [--seed N]
labtools-valley [--seed N]
labtools-balanced [RUNS] [VECTOR_SIZE] [--seed N]
labtools-cosine [PATH]
labtools-matrix
```

- `labtools-scrambler` prints the two counts and their fractions of the runs.
  Any of `RUNS` and `VECTOR_SIZE` left out is asked for on standard input.
- `labtools-valley` prints success rates for `n = 10, 20, ..., 100`, each over
  run counts 1000, 3000, ..., 25000, and the average for each `n`.
- `labtools-balanced` prints each shuffled sequence of `2 * VECTOR_SIZE + 1`
  steps and its reordered form; missing numbers are asked for as above.
- `labtools-cosine` reads `PATH` (default `double_vectors.txt`) and prints one
  line `(x, y)= cosine` per pair, where `(x, y)` is the earlier vector of the
  pair. Reading stops at the first token that is not a number; a file that
  cannot be opened gives no output. A zero vector gives a cosine of `nan`.
- `labtools-matrix` prints two 4x4 counting matrices and their product.

`--seed` makes a run repeatable.

## Library use

```python
import random

from labtools.valley import lowest_valley, p2_p1, success_rate
from labtools.cosine import DoubleVector, cosine_dist
from labtools.matrix import create_matrix, matrix_multiply

steps = [1, -1, 1, -1, -1, -1, 1]
low = lowest_valley(steps)          # 5
print(p2_p1(steps, low))            # [1, 1, -1, 1, -1, -1]

print(success_rate(10, 1000, random.Random(1)))

print(cosine_dist(DoubleVector(from_=-1.0, to=-2.0), DoubleVector(from_=3.0, to=4.0)))

m = create_matrix(2, 2)             # [[0, 1], [2, 3]]
print(matrix_multiply(m, m))        # [[2, 3], [6, 11]]
```

Functions that shuffle take an optional `random.Random` instance, so runs can
be repeated with a fixed seed. `matrix_multiply` raises `ValueError` unless
both matrices are square and of the same size.