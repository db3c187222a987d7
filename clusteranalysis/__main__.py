from clusteranalysis.experiments import main

if __name__ == '__main__':
    main()
