import pytest

from dzeroshape.spherocity import SpherocityClass, classes_for


@pytest.mark.parametrize("cr", ["on", "off"])
def test_eight_classes_named_in_order(cr):
    classes = classes_for(cr)
    assert [c.name for c in classes] == [f"mult_{i}" for i in range(8)]


@pytest.mark.parametrize("cr", ["on", "off"])
def test_multiplicity_classes_are_contiguous(cr):
    classes = classes_for(cr)[:7]
    for upper, lower in zip(classes, classes[1:]):
        assert upper.ft0_low == lower.ft0_high
    assert classes[0].ft0_high == 242


@pytest.mark.parametrize("cr", ["on", "off"])
def test_each_ft0_value_in_one_multiplicity_class(cr):
    classes = classes_for(cr)[:7]
    lowest = classes[-1].ft0_low
    for ft0 in range(lowest, 242):
        assert sum(c.contains(ft0) for c in classes) == 1


def test_source_boundaries():
    on = classes_for("on")
    off = classes_for("off")
    assert on[0].ft0_low == 46
    assert off[0].ft0_low == 58
    assert on[7].jetty == 0.557
    assert off[7].jetty == 0.552


def test_contains_is_half_open():
    top = classes_for("on")[0]
    assert top.contains(top.ft0_low)
    assert not top.contains(top.ft0_high)
    assert not top.contains(top.ft0_low - 1)


def test_minimum_bias_contains_all_non_negative():
    mb = classes_for("off")[7]
    assert mb.contains(0)
    assert mb.contains(10_000)
    assert not mb.contains(-1)


@pytest.mark.parametrize("cr", ["on", "off"])
def test_jetty_and_isotropic_cuts(cr):
    for cls in classes_for(cr):
        assert cls.is_jetty(0.0)
        assert not cls.is_jetty(cls.jetty)
        assert not cls.is_jetty(-0.1)
        assert cls.is_isotropic(1.0)
        assert not cls.is_isotropic(cls.isotropic)
        assert not cls.is_isotropic(1.01)
        assert cls.jetty < cls.isotropic


def test_custom_class():
    cls = SpherocityClass("x", 5, 10, 0.3, 0.8)
    assert cls.contains(9.5)
    assert cls.is_jetty(0.29)
    assert cls.is_isotropic(0.81)


def test_unknown_setting_rejected():
    with pytest.raises(ValueError):
        classes_for("maybe")