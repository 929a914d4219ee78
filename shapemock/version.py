PACKAGE = "shapemock"
VERSION = "0.1.0"
LICENSE = "GNU GPL v2"
