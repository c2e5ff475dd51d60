"""Command-line interface for cssgrad."""


def main_imports():
    # For responsiveness, we import after parsing arguments. It's messy, but
    # allows us to still declare imports at the start of the module.
    global sys, warnings, editor, hex_colors_to_rgba, rgba_to_hex

    import sys
    import warnings

    from cssgrad import editor
    from cssgrad.color import hex_colors_to_rgba, rgba_to_hex


def parse_args():
    import argparse

    parser = argparse.ArgumentParser(
        description="Parse, edit, and rewrite CSS linear gradients."
    )

    main_args = parser.add_argument_group(title="Main arguments")
    main_args.add_argument(
        "gradients",
        nargs="*",
        metavar="GRADIENT",
        help="linear-gradient() values (default: read one per line from stdin)",
    )
    main_args.add_argument(
        "--default",
        metavar="GRADIENT",
        help="Gradient to use when a value can't be parsed "
        "(default: red to blue, left to right)",
    )

    edit_args = parser.add_argument_group(title="Edit arguments")
    direction = edit_args.add_mutually_exclusive_group()
    direction.add_argument(
        "--direction", help='Set the direction (e.g. "to top left" or "45deg")'
    )
    direction.add_argument(
        "--angle",
        type=float,
        help="Set the direction in degrees, using a keyword for 0/90/180/270",
    )
    direction.add_argument(
        "--pointer",
        type=float,
        nargs=2,
        metavar=("DX", "DY"),
        help="Set the direction from a pointer offset from the dial center",
    )
    direction.add_argument(
        "--cycle-direction",
        action="store_true",
        help="Switch to the next keyword direction",
    )
    edit_args.add_argument(
        "--add-stop",
        nargs=2,
        action="append",
        default=[],
        metavar=("COLOR", "POSITION"),
        help="Add a color stop (may be repeated)",
    )
    edit_args.add_argument(
        "--remove-stop",
        type=int,
        action="append",
        default=[],
        metavar="INDEX",
        help="Remove the color stop at INDEX, after sorting (may be repeated)",
    )
    edit_args.add_argument(
        "--preset",
        nargs="+",
        metavar="COLOR",
        help="Replace the stops with evenly spaced colors, left to right",
    )

    output_args = parser.add_argument_group(title="Output arguments")
    output_args.add_argument(
        "--convert-only",
        action="store_true",
        help="Only rewrite hex colors as rgba(), leaving the rest of each value as is",
    )
    output_args.add_argument(
        "--stops", action="store_true", help="Print a table of color stops"
    )
    output_args.add_argument(
        "--hex", action="store_true", help="Print stop colors as hex in the table"
    )
    output_args.add_argument(
        "--quiet", action="store_true", help="Don't print parser warnings"
    )

    return parser.parse_args()


def die(err):
    print("Error:", err, file=sys.stderr)
    sys.exit(1)


def edit(model, args):
    """Apply the edit arguments to a model."""
    if args.preset:
        editor.apply_preset(model, args.preset)

    if args.direction is not None:
        editor.set_direction(model, args.direction)
    elif args.angle is not None:
        editor.set_direction(model, editor.angle_to_direction(args.angle))
    elif args.pointer is not None:
        editor.set_direction(model, editor.pointer_direction(*args.pointer))
    elif args.cycle_direction:
        editor.cycle_direction(model)

    for color, position in args.add_stop:
        editor.add_stop(model, color, float(position))
    # Remove from the end, so earlier removals don't shift later indexes
    for index in sorted(args.remove_stop, reverse=True):
        editor.remove_stop(model, index, strict=True)

    return model


def print_stops(model, as_hex):
    print(f"  direction: {model.direction.to_css()}")
    for i, stop in enumerate(model.stops):
        color = rgba_to_hex(stop.color) if as_hex else stop.color.to_css()
        alpha = f"  alpha {stop.color.alpha:g}" if as_hex else ""
        print(f"  {i:>3}  {stop.position:5.1f}%  {color}{alpha}")


def main():
    args = parse_args()
    main_imports()

    if args.quiet:
        warnings.simplefilter("ignore")

    gradients = args.gradients or [line for line in sys.stdin if line.strip()]
    options = editor.EditorOptions(default_value=args.default)

    for gradient in gradients:
        if args.convert_only:
            print(hex_colors_to_rgba(gradient.strip()))
            continue

        try:
            model = editor.initialize_from_options(gradient, options)
            edit(model, args)
        except (ValueError, IndexError, editor.EmptyInputError) as e:
            die(e)

        print(editor.to_text(model))
        if args.stops:
            print_stops(model, args.hex)


if __name__ == "__main__":
    main()
