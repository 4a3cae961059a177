from m3uplus.app import run

run()
