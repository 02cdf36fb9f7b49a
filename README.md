# dzeroshape

A Python library for studying how prompt and non-prompt D0 mesons in
simulated pp collisions at 13.6 TeV depend on event activity and event
shape. It reads per-event records, fills histograms and profiles, stores
them as JSON, and draws comparison figures with matplotlib: the mean
number of multi-parton interactions and the mean hard-scattering scale
against the leading-D0 transverse momentum, the mean transverse
spherocity, the charged-particle yields in the toward, transverse and
away regions, and the non-prompt fraction in spherocity-selected event
classes.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from dzeroshape.events import input_path, read_events
from dzeroshape.leading import leading_profiles
from dzeroshape.storage import save_histograms
from dzeroshape.plots_cr import plot_cr_comparison

for cr in ("on", "off"):
    profiles = leading_profiles(read_events(input_path("data", cr, "on")))
    profiles.normalise_regions()
    save_histograms(f"leading_CR{cr}_MPIon.json", profiles.as_dict())

plot_cr_comparison(
    "leading_CRon_MPIon.json", "leading_CRoff_MPIon.json", "mpi", "D0_MPI.pdf"
)
```

## Modules

### `dzeroshape.histogram`

`uniform_edges(nbins, low, high)` returns equally spaced bin edges.

`Histogram(edges, contents=None, sumw2=None)` is a weighted
one-dimensional histogram with half-open bins numbered from 0, plus
underflow and overflow. It has `fill(x, weight=1.0)`,
`integral(first=0, last=None)` (inclusive, flows excluded),
`bin_center(index)`, `bin_width(index)`, `errors()`, `scale(factor)`,
`divide(other)` (bins with an empty divisor become zero),
`divide_by_bin_width()` and `copy()`.

`Profile(edges)` keeps the mean of a quantity per bin: `fill(x, y)`
(values outside the range are dropped), `means()`, `errors()` (standard
error on each mean), `mean_y()`, `scale(factor)` and `projection()`,
which returns a `Histogram` of the means and their errors.

### `dzeroshape.events`

`Track` and `Event` are dataclasses describing one event. A `Track`
gives `pt()` and `rapidity()`. In an `Event`, index 1 of `pt_lead`,
`toward`, `transverse` and `away` belongs to the prompt leading D0 and
index 2 to the non-prompt one.

Events are stored as JSON Lines, one event per line:
`write_events(events, path)` writes them and returns the count,
`read_events(path)` yields them back. `input_path(data_dir, cr, mpi)`
gives `data_dir/CR-<cr>-MPI-<mpi>/pp-<cr>-<mpi>.jsonl` for a colour
reconnection / MPI setting of `"on"` or `"off"`; both off raises
`ValueError`, as there is no such sample.

### `dzeroshape.slicing`

`multiplicity_histogram(events, fraction_of_events=0.01)` histograms FT0
(110 bins from -0.5 to 109.5) over the first given share of the events.
`percentile_thresholds(histogram, fractions=DEFAULT_FRACTIONS)` returns
`(fraction, bin centre)` pairs: for each fraction, the bin from which the
top-down sum first reaches that share of all entries.

### `dzeroshape.leading`

`leading_profiles(events, progress=False)` fills a `LeadingProfiles`
with profiles against the leading prompt and non-prompt D0 pT (leading
pT above 0.15 GeV/c): mean pT-hat, MPI count, spherocity and the
toward, transverse and away multiplicities. `normalise_regions()` divides
each regional profile by its overall mean; `as_dict()` gives the profiles
under their stored names (`pThatp`, `pThatnp`, `MPIp`, `MPInp`,
`Spherop`, `Spheronp`, `towardp_ptlead`, `transp_ptlead`,
`awayp_ptlead`, `towardnp_ptlead`, `transnp_ptlead`, `awaynp_ptlead`).
With `progress=True` a bar from `dzeroshape.progress` is printed.

### `dzeroshape.spherocity`

`classes_for(cr)` returns the seven FT0 classes `mult_0` … `mult_6` and
the minimum-bias class `mult_7` for CR `"on"` or `"off"`, each a
`SpherocityClass` with `contains(ft0)`, `is_jetty(sp)` and
`is_isotropic(sp)`.

### `dzeroshape.progress`

`progress_bar(current, total, done="=", remain=".")` renders a coloured
50-cell bar; `print_progress(current, total, stream=None)` writes it.

### `dzeroshape.storage`

`save_histograms(path, histograms)` writes a name-to-`Histogram`/`Profile`
mapping as JSON; `load_histograms(path)` reads it back.

### Figures

Each function saves the figure to `output` and returns it.

- `dzeroshape.plots_cr.plot_cr_comparison(on_path, off_path, quantity, output)`:
  `quantity` is `"mpi"` or `"pthat"`; upper panel for CR on and off,
  lower panel their ratio, from `cr_ratio(on_profile, off_profile)`.
- `dzeroshape.plots_mean_spherocity.plot_mpi_spherocity(on_path, off_path, output)`:
  mean spherocity with MPI on and off.
- `dzeroshape.plots_regions.plot_regions(on_path, off_path, species, output)`:
  regional multiplicities, `species` `"prompt"` or `"nonprompt"`.
- `dzeroshape.plots_high_mult.plot_high_multiplicity(path, output, label)`:
  jetty, isotropic and integrated fractions (`ratio_J_mult_0`,
  `ratio_I_mult_0`, `ratio_int_mult_0`) of the top FT0 class.
- `dzeroshape.plots_classes_mb.plot_minimum_bias_classes(path, output, label=None)`:
  the same for the minimum-bias class (`ratio_*_mult_7`).

`dzeroshape.plot_style` holds the shared axis and legend styling
(`style_axes`, `style_legend`) and `alice_fraction()`, the measured
minimum-bias non-prompt fraction with statistical and systematic
uncertainties.

## What the package does not do

- It installs no command-line program; everything is used from Python.
- It has no ready-made step that fills the non-prompt fraction
  histograms (`ratio_J_mult_*`, `ratio_I_mult_*`, `ratio_int_mult_*`)
  from events. The two class plots read a file holding them, which you
  build yourself from `Histogram`, `classes_for` and `save_histograms`.
- It draws no figure comparing a simulated minimum-bias fraction with
  the measurement; the measured values are only provided as data by
  `alice_fraction()`.