from atlas_crud.main import main

main()
