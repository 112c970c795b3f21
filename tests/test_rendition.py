import pytest

from ecma48 import GraphicRendition, ParameterError, StandardColor, reset, select_graphic


def test_rendition_call_order():
    rendition = select_graphic().foreground("red").bold().underline()

    assert str(rendition) == "\x1b[31;1;4m"
    assert rendition.codes == (31, 1, 4)

    assert str(select_graphic().underline().bold().foreground("red")) == "\x1b[4;1;31m"


def test_rendition_is_immutable():
    base = select_graphic().bold()
    italic = base.italic()

    assert str(base) == "\x1b[1m"
    assert str(italic) == "\x1b[1;3m"

    assert base.render() == base.render()
    assert str(base) == str(base)


def test_rendition_empty_and_reset():
    assert str(select_graphic()) == "\x1b[m"
    assert not select_graphic()

    assert str(reset()) == "\x1b[0m"
    assert str(select_graphic().default()) == "\x1b[0m"


def test_rendition_attributes():
    assert str(
        select_graphic()
        .bold()
        .faint()
        .italic()
        .underline()
        .blink()
        .fast_blink()
        .reverse()
        .conceal()
        .strikethrough()
    ) == "\x1b[1;2;3;4;5;6;7;8;9m"

    assert str(
        select_graphic()
        .normal_intensity()
        .not_italic()
        .not_underline()
        .steady()
        .positive()
        .reveal()
        .not_strikethrough()
    ) == "\x1b[22;23;24;25;27;28;29m"

    assert str(
        select_graphic().gothic().double_underline().framed().encircled().overline()
    ) == "\x1b[20;21;51;52;53m"
    assert str(select_graphic().not_framed().not_overline()) == "\x1b[54;55m"


def test_rendition_fonts():
    assert str(select_graphic().font(0).font(9)) == "\x1b[10;19m"

    with pytest.raises(ParameterError):
        select_graphic().font(10)


def test_rendition_standard_colors():
    assert str(select_graphic().foreground(StandardColor.BLACK)) == "\x1b[30m"
    assert str(select_graphic().foreground("white")) == "\x1b[37m"
    assert str(select_graphic().background("blue")) == "\x1b[44m"

    assert str(select_graphic().foreground("cyan", bright=True)) == "\x1b[96m"
    assert str(select_graphic().background("red", bright=True)) == "\x1b[101m"

    assert (
        str(select_graphic().foreground_default().background_default())
        == "\x1b[39;49m"
    )

    with pytest.raises(ValueError, match="Unknown color name, got 'chartreuse'"):
        select_graphic().foreground("chartreuse")


def test_rendition_extended_colors():
    assert str(select_graphic().foreground_indexed(141)) == "\x1b[38;5;141m"
    assert str(select_graphic().background_indexed(0)) == "\x1b[48;5;0m"

    assert (
        str(select_graphic().foreground_rgb(1, 2, 3).background_indexed(4))
        == "\x1b[38;2;1;2;3;48;5;4m"
    )
    assert (
        str(select_graphic().bold().background_rgb(255, 128, 0).italic())
        == "\x1b[1;48;2;255;128;0;3m"
    )


def test_rendition_extended_colors_invalid():
    with pytest.raises(ParameterError):
        select_graphic().foreground_indexed(256)

    with pytest.raises(ParameterError):
        select_graphic().foreground_rgb(0, -1, 0)

    with pytest.raises(ParameterError):
        select_graphic().background_rgb(0, 0, 300)


def test_rendition_from_names():
    assert GraphicRendition.from_names("red", "bold", "underline") == (
        select_graphic().foreground("red").bold().underline()
    )
    assert str(GraphicRendition.from_names("on_blue", "not-italic")) == "\x1b[44;23m"

    with pytest.raises(ValueError):
        GraphicRendition.from_names("sparkly")


def test_rendition_concatenation():
    rendition = select_graphic().bold()

    assert "Hello " + rendition == "Hello \x1b[1m"
    assert rendition + "World" == "\x1b[1mWorld"
    assert f"{rendition}World{reset()}" == "\x1b[1mWorld\x1b[0m"


def test_rendition_encode():
    assert select_graphic().foreground("red").encode() == b"\x1b[31m"


def test_rendition_ideograms():
    assert str(
        select_graphic()
        .ideogram_underline()
        .ideogram_double_underline()
        .ideogram_overline()
        .ideogram_double_overline()
        .ideogram_stress()
        .ideogram_cancel()
    ) == "\x1b[60;61;62;63;64;65m"

    assert str(GraphicRendition.from_names("ideogram_stress")) == "\x1b[64m"


def test_rendition_codes_from_list():
    rendition = GraphicRendition([1, 4])

    assert rendition.codes == (1, 4)
    assert str(rendition.italic()) == "\x1b[1;4;3m"
    assert hash(rendition) == hash(GraphicRendition((1, 4)))
    assert rendition == GraphicRendition((1, 4))


def test_rendition_invalid_codes():
    with pytest.raises(ParameterError):
        select_graphic().add(None)

    with pytest.raises(ParameterError):
        select_graphic().bold().add(-1)

    with pytest.raises(ParameterError):
        GraphicRendition(("1",))

    with pytest.raises(ParameterError):
        GraphicRendition((True,))
