"""Basic rainbowvis usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from rainbowvis import Rainbow, ColorGradient, InvalidColorError


def demonstrate_default_rainbow() -> None:
    # Default spectrum red -> yellow -> lime -> blue over [0, 100].
    rainbow = Rainbow()
    for n in (0, 25, 50, 75, 100):
        print(f"{n:>5}: #{rainbow.color_at(n)}")


def demonstrate_heatmap_row() -> None:
    # Diverging scale for temperature anomalies, evaluated in one call.
    scale = Rainbow(spectrum=["navy", "white", "#c00000"], number_range=(-5.0, 5.0))
    anomalies = [-6.2, -3.1, -0.4, 0.0, 1.7, 4.9, 8.0]
    for value, color in zip(anomalies, scale.colors_at(anomalies)):
        print(f"{value:>6.1f}: #{color}")


def demonstrate_single_gradient() -> None:
    gauge = ColorGradient("lime", "red", 0, 1)
    print("Gauge at 30%:", gauge.color_at(0.3), gauge.rgb_at(0.3))


def demonstrate_errors() -> None:
    rainbow = Rainbow()
    try:
        rainbow.set_spectrum(["red", "not-a-color"])
    except InvalidColorError as e:
        print("Rejected:", e)
    print("Spectrum unchanged:", rainbow.spectrum)


if __name__ == "__main__":
    demonstrate_default_rainbow()
    demonstrate_heatmap_row()
    demonstrate_single_gradient()
    demonstrate_errors()
