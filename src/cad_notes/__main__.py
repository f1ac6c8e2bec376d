from cad_notes.main import run

run()
