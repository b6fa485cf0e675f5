import io

from femlight import (
    FEMIOError,
    LoadNode,
    Model,
    ModelReader,
    Node,
    ObjectNotFoundError,
    read_model,
    write_model,
)
from femlight.tables import loads_frame, nodes_frame


def main():
    """
    SAVE AND RELOAD A SMALL MODEL
    =============================
    Build a simply supported beam's nodes and a midspan load, write it to
    text, read it back, and show what happens with bad files.
    """

    # ========================================================================
    # SETUP: 5 nodes along a 4 m beam, 1 kN down at midspan
    # ========================================================================
    L = 4.0
    P = 1000.0
    num_nodes = 5

    model = Model()
    for i in range(num_nodes):
        model.add_node(Node(gn=i, coords=[L * i / (num_nodes - 1), 0.0]))

    mid = model.nodes.find(num_nodes // 2)
    model.add_load(LoadNode.on(mid, [0.0, -P, 0.0], gn=0))

    # ========================================================================
    # WRITE
    # ========================================================================
    out = io.StringIO()
    write_model(model, out)
    text = out.getvalue()

    print("=" * 60)
    print("MODEL FILE")
    print("=" * 60)
    print(text)

    # ========================================================================
    # READ BACK
    # ========================================================================
    copy = read_model(text)

    print("=" * 60)
    print("READ BACK")
    print("=" * 60)
    print(nodes_frame(copy.nodes).to_string(index=False))
    print()
    print(loads_frame(copy.loads).to_string(index=False))
    print()

    # ========================================================================
    # BAD FILES: the two failure kinds
    # ========================================================================
    print("=" * 60)
    print("ERRORS")
    print("=" * 60)

    # Load written before its node: an ordering problem
    try:
        read_model("<LoadNode> 0 7 2 1.0 2.0\n<Node> 7 2 0.0 0.0\n<END>")
    except ObjectNotFoundError as e:
        print(f"Dangling reference: GN={e.gn} ({e.base_class_name}) in {e.location}")

    # Garbage where the force vector size should be: corrupt data
    try:
        read_model("<Node> 7 2 0.0 0.0\n<LoadNode> 0 7 two 1.0 2.0\n<END>")
    except FEMIOError as e:
        print(f"Corrupt data: {e}")

    # Same file, but keep going past bad blocks
    reader = ModelReader(skip_errors=True)
    partial = reader.read(
        "<Node> 7 2 0.0 0.0\n"
        "<LoadNode> 0 7 two 1.0 2.0\n"
        "<LoadNode> 1 7 2 0.0 -500.0\n"
        "<END>"
    )
    print(f"Skipped {len(reader.errors)} block(s), kept {len(partial.loads)} load(s)")


if __name__ == "__main__":
    main()
