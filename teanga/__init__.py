"""
The teanga library provides a data model and codec for corpora of
linguistically annotated documents, where each document is a set of
named, typed layers (the Teanga annotation format).

Layers
~~~~~~
Working our way up from the bottom:

* layer model (teanga.layer, teanga.value): the closed set of layer
  shapes (`Characters`, `L1` ... `L3S`, `MetaLayer`) and the schema
  entries describing them (`LayerDescriptor`)

* codec (teanga.codec): conversion between layers and untyped,
  JSON-like values, working out the layer shape from the value if need
  be

* text format (teanga.text, teanga.parse, teanga.flow): a
  line-oriented, YAML-like rendering of a whole corpus, and a reader
  for it

* corpus (teanga.corpus): the interface we expect a corpus store to
  provide, and a simple in-memory store

* facade (teanga.facade): everything above behind an interface that
  only deals in untyped values and text ::

               facade                            [facade]
                 |
        +--------+-------------+
        |        |             |
        v        v             v
      corpus   text/parse    codec              [conversion]
        |        |             |
        +--------+------+------+
                        v
                      layer                     [model]

There is also a small tokeniser (teanga.tokenize) for getting a first
token layer over some text, and a command line tool (scripts/teanga-util,
see teanga.cmd).
"""
